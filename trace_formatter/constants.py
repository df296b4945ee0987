"""
Global constants used across the stack trace formatter.
"""

from pathlib import Path

# Sample input
EXAMPLE_TRACE = (
    r"#0 /var/www/html/app/Models/User.php(45): PDO->prepare() "
    r"#1 /var/www/html/app/Controllers/UserController.php(123): App\Models\User->findById() "
    r"#2 /var/www/html/public/index.php(67): App\Controllers\UserController->show() "
    r"#3 {main}"
)
"""Single-line PHP trace, as produced by Exception::getTraceAsString() pasted from a log"""

# Rendering
PLACEHOLDER_TEXT = "Formatted stack trace will appear here"
"""Shown instead of the output when the input is blank"""

FRAME_SEPARATOR = ": "
"""Printed between the location/line info and the call expression"""

# Configuration
DEFAULT_CONFIG_PATH = Path("config/defaults.toml")
"""Config file picked up when --config is not given"""

OUTPUT_FORMATS = ("rich", "text", "json")
"""Supported CLI output modes"""
