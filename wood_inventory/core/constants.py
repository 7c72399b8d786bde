# wood_inventory/core/constants.py

# ─────────────────────────────────────────────────────────
# API DEFAULTS
# ─────────────────────────────────────────────────────────
DEFAULT_API_URL = "http://localhost:3000/api"
JSON_CONTENT_TYPE = "application/json"
BINARY_CONTENT_TYPE = "application/octet-stream"

# ─────────────────────────────────────────────────────────
# SESSION STORAGE KEYS
# ─────────────────────────────────────────────────────────
TOKEN_KEY = "token"
USER_KEY = "user"

# ─────────────────────────────────────────────────────────
# NAVIGATION
# ─────────────────────────────────────────────────────────
LOGIN_PATH = "/login"
LOGIN_PAGE = "pages/login.py"

# ─────────────────────────────────────────────────────────
# RESOURCE PATHS
# ─────────────────────────────────────────────────────────
AUTH_LOGIN_PATH = "/auth/login"
AUTH_REGISTER_PATH = "/auth/register"
INVENTORY_PATH = "/inventory"
SUPPLIERS_PATH = "/suppliers"
STOCK_IN_PATH = "/stock-in"
STOCK_OUT_PATH = "/stock-out"
DASHBOARD_STATS_PATH = "/dashboard/stats"
DASHBOARD_ACTIVITY_PATH = "/dashboard/recent-activity"
REPORT_STOCK_MOVEMENT_PATH = "/reports/stock-movement"
REPORT_SUPPLIER_PERFORMANCE_PATH = "/reports/supplier-performance"

LOW_STOCK_PARAM = "lowStock"

# ─────────────────────────────────────────────────────────
# REPORT EXPORTS
# ─────────────────────────────────────────────────────────
EXPORT_PDF = "pdf"
EXPORT_EXCEL = "excel"
EXPORT_EXTENSIONS = {EXPORT_PDF: "pdf", EXPORT_EXCEL: "xlsx"}
EXPORT_MIME_TYPES = {
    EXPORT_PDF: "application/pdf",
    EXPORT_EXCEL: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}
REPORT_TYPES = ["stock-movement", "supplier-performance"]

# ─────────────────────────────────────────────────────────
# CURRENCY
# ─────────────────────────────────────────────────────────
CURRENCY_CODE = "LKR"
