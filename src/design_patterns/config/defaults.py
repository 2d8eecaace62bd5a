# src/design_patterns/config/defaults.py
"""Default configuration, expanded against the environment at load time."""
from typing import Any, Dict

ENV_PREFIX = "DESIGN_PATTERNS_"

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    # Logging configuration
    "logging": {
        "level": "${DESIGN_PATTERNS_LOG_LEVEL:WARNING}",
        "destination": "${DESIGN_PATTERNS_LOG_DESTINATION:stderr}",
        "format": "${DESIGN_PATTERNS_LOG_FORMAT:console}",
        "file_path": "${DESIGN_PATTERNS_LOG_FILE:logs/design_patterns.log}",
        "max_size_mb": 10,
        "backup_count": 3,
    },
    # Demo run configuration
    "demo": {
        "categories": "${DESIGN_PATTERNS_CATEGORIES:creational,structural,behavioral}",
        "separator": "--------------------------------------------",
        "show_banner": True,
    },
}
