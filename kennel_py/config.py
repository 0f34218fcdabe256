import os

# Configuration via environment variables with sensible defaults
PORT = int(os.getenv("PORT", "8000"))

# Heat cycle prediction
DEFAULT_CYCLE_LENGTH_DAYS = int(os.getenv("DEFAULT_CYCLE_LENGTH_DAYS", "197"))  # Typical inter-heat interval
HEAT_CYCLE_DEFAULT_LENGTH_DAYS = int(os.getenv("HEAT_CYCLE_DEFAULT_LENGTH_DAYS", "21"))  # Used when a cycle has no end date

# Follow-up checks after a completed stud breeding
PREGNANCY_CHECK_DAYS = int(os.getenv("PREGNANCY_CHECK_DAYS", "30"))
LITTER_SIZE_CHECK_DAYS = int(os.getenv("LITTER_SIZE_CHECK_DAYS", "65"))

# Query windows
LOOKAHEAD_DAYS = int(os.getenv("LOOKAHEAD_DAYS", "30"))
PREDICTION_WINDOW_PAST_DAYS = int(os.getenv("PREDICTION_WINDOW_PAST_DAYS", "30"))
PREDICTION_WINDOW_FUTURE_DAYS = int(os.getenv("PREDICTION_WINDOW_FUTURE_DAYS", "60"))

# Display caps
DAY_EVENT_DISPLAY_LIMIT = int(os.getenv("DAY_EVENT_DISPLAY_LIMIT", "3"))
DASHBOARD_LIST_LIMIT = int(os.getenv("DASHBOARD_LIST_LIMIT", "5"))

# HTTP
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
