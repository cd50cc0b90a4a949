"""Domain impact resolution: resolver, path matcher, aggregator, outputs."""

from .detect import changed_packages, detect_impacted_domains
from .matrix import DetectionOutputs, build_outputs, empty_outputs
from .model import Domain, ImpactedDomain
from .paths import is_under_package, normalize_path
from .resolver import resolve_domain_packages

__all__ = [
    "DetectionOutputs",
    "Domain",
    "ImpactedDomain",
    "build_outputs",
    "changed_packages",
    "detect_impacted_domains",
    "empty_outputs",
    "is_under_package",
    "normalize_path",
    "resolve_domain_packages",
]
