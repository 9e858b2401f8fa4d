from .config import Settings, settings
from .security import hash_password, verify_password
from .validation import first_validation_message, format_validation_error
