"""Instance diagnostics used by the command-line tools."""

from sonarqube_client.analysis.instance import (
    ExpectedFailure,
    InstanceAnalysis,
    analyze_expected_failures,
    analyze_instance,
    format_summary,
    is_version_at_least,
)
from sonarqube_client.analysis.v2_apis import (
    KNOWN_V2_ENDPOINTS,
    EndpointResult,
    V2ApiReport,
    V2Endpoint,
    check_v2_apis,
)

__all__ = [
    "KNOWN_V2_ENDPOINTS",
    "EndpointResult",
    "ExpectedFailure",
    "InstanceAnalysis",
    "V2ApiReport",
    "V2Endpoint",
    "analyze_expected_failures",
    "analyze_instance",
    "check_v2_apis",
    "format_summary",
    "is_version_at_least",
]
