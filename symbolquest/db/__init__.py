from symbolquest.db.database import get_session, init_db
from symbolquest.db.operations import (
    create_draw,
    draw_to_model,
    get_draw_for_date,
    get_draw_history,
    get_recent_card_ids,
    get_subscription_tier,
    get_usage_count,
    get_user_account,
    increment_usage,
    save_enhanced_interpretation,
    set_subscription_tier,
)

__all__ = [
    "create_draw",
    "draw_to_model",
    "get_draw_for_date",
    "get_draw_history",
    "get_recent_card_ids",
    "get_session",
    "get_subscription_tier",
    "get_usage_count",
    "get_user_account",
    "increment_usage",
    "init_db",
    "save_enhanced_interpretation",
    "set_subscription_tier",
]
