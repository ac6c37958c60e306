from .datetime_helpers import ensure_utc, utc_now
from .result import Failure, Result, Success, failure, is_failure, is_success, success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "is_success",
    "is_failure",
    "utc_now",
    "ensure_utc",
]
