"""
Domain Constants: workbook schema codes, file names, thresholds.

Thresholds are module-level names so that default.yaml (src.core.config)
can override them without touching the suites.
"""

# =============================================================================
# Workbook Item Types
# =============================================================================
# Azure Monitor Workbook item "type" codes:
# 1  markdown text
# 3  query (KQL)
# 9  parameter set
# 10 notebook group (legacy group)
# 11 link set (tabs)
# 12 group

ITEM_TYPE_MARKDOWN = 1
ITEM_TYPE_QUERY = 3
ITEM_TYPE_PARAMETERS = 9
ITEM_TYPE_NOTEBOOK_GROUP = 10
ITEM_TYPE_LINKS = 11
ITEM_TYPE_GROUP = 12

VALID_ITEM_TYPES = (
    ITEM_TYPE_MARKDOWN,
    ITEM_TYPE_QUERY,
    ITEM_TYPE_PARAMETERS,
    ITEM_TYPE_NOTEBOOK_GROUP,
    ITEM_TYPE_LINKS,
    ITEM_TYPE_GROUP,
)

# Query records extracted from parameter sets use this marker instead of an item type
PARAMETER_QUERY_TYPE = "parameter"

UNNAMED_ITEM = "unnamed"
UNNAMED_PARAMETER = "unnamed-param"

# =============================================================================
# Grid Formatters
# =============================================================================

FORMATTER_HIDDEN = 5
FORMATTER_LINK = 7

# =============================================================================
# File Layout
# =============================================================================
# <repo>/
# ├── AzureLocal-LENS-Workbook.json
# ├── README.md
# ├── CONTRIBUTING.md, SECURITY.md, LICENSE
# └── test-results/nunit.xml

WORKBOOK_FILENAME = "AzureLocal-LENS-Workbook.json"
README_FILENAME = "README.md"
RESULTS_DIRNAME = "test-results"
REPORT_FILENAME = "nunit.xml"
CONFIG_FILENAME = "default.yaml"

# =============================================================================
# Thresholds
# =============================================================================

EXPECTED_NOTEBOOK_VERSION = "Notebook/1.0"

MAX_DUPLICATE_NAMES = 5
MIN_ROW_LIMIT = 2000
MAX_FILE_SIZE_BYTES = 5 * 1024 * 1024
MIN_PIPE_PERCENTAGE = 90
PORTAL_GUID_SCAN_WINDOW = 500

# Regression guard
MIN_ITEMS = 200
MIN_QUERIES = 120
MIN_CHARTS = 30

# =============================================================================
# Report
# =============================================================================

REPORT_NAMESPACE = "LENS.Workbook.Tests"
DEFAULT_SUITE_NAME = "Default"

# =============================================================================
# Named Rules (one-off business rules, toggled in default.yaml)
# =============================================================================

RULE_UPDATE_ATTEMPTS_PIVOT = "update_attempts_pivot"
RULE_CLUSTERS_UPDATING_LINK = "clusters_updating_link"

KNOWN_RULES = (
    RULE_UPDATE_ATTEMPTS_PIVOT,
    RULE_CLUSTERS_UPDATING_LINK,
)
