"""Link API domain: extraction and liveness checking of external links."""

from .CheckResult import CheckResult
from .FailureReport import FailureReport
from .LinkRecord import LinkRecord
from .Occurrence import Occurrence

__all__ = [
    "CheckResult",
    "FailureReport",
    "LinkRecord",
    "Occurrence",
]
