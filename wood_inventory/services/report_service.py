# wood_inventory/services/report_service.py
"""Report data and binary report exports.

Exports fetch the rendered report from the backend and hand the bytes to a
``deliver`` callable as a :class:`ReportDownload`. The default delivery
writes the file into the configured download directory; the Streamlit pages
pass a callable that renders a download button instead.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from wood_inventory.api.client import ApiClient, Params
from wood_inventory.config import load_api_config
from wood_inventory.core.constants import (
    EXPORT_EXCEL,
    EXPORT_EXTENSIONS,
    EXPORT_MIME_TYPES,
    EXPORT_PDF,
    REPORT_STOCK_MOVEMENT_PATH,
    REPORT_SUPPLIER_PERFORMANCE_PATH,
)
from wood_inventory.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReportDownload:
    filename: str
    content: bytes
    mime_type: str


Deliver = Callable[[ReportDownload], Any]


def save_download(download: ReportDownload, directory: Optional[Path] = None) -> Path:
    """Write ``download`` into ``directory`` (the configured one by default)."""
    target_dir = Path(directory) if directory is not None else load_api_config().download_dir
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / download.filename
    path.write_bytes(download.content)
    logger.info("Saved report to %s", path)
    return path


def _timestamp_millis() -> int:
    return int(time.time() * 1000)


def build_filename(report_type: str, export_format: str) -> str:
    return f"{report_type}_report_{_timestamp_millis()}.{EXPORT_EXTENSIONS[export_format]}"


def _export(
    client: ApiClient,
    report_type: str,
    export_format: str,
    params: Params,
    deliver: Optional[Deliver],
) -> None:
    content = client.get_bytes(f"/reports/{report_type}/{export_format}", params=params)
    download = ReportDownload(
        filename=build_filename(report_type, export_format),
        content=content,
        mime_type=EXPORT_MIME_TYPES[export_format],
    )
    (deliver or save_download)(download)


# ─────────────────────────────────────────────────────────
# REPORT DATA
# ─────────────────────────────────────────────────────────
def get_stock_movement(client: ApiClient, params: Params = None) -> Any:
    return client.get(REPORT_STOCK_MOVEMENT_PATH, params=params)


def get_supplier_performance(client: ApiClient) -> Any:
    return client.get(REPORT_SUPPLIER_PERFORMANCE_PATH)


# ─────────────────────────────────────────────────────────
# EXPORTS
# ─────────────────────────────────────────────────────────
def export_pdf(
    client: ApiClient,
    report_type: str,
    params: Params = None,
    deliver: Optional[Deliver] = None,
) -> None:
    _export(client, report_type, EXPORT_PDF, params, deliver)


def export_excel(
    client: ApiClient,
    report_type: str,
    params: Params = None,
    deliver: Optional[Deliver] = None,
) -> None:
    _export(client, report_type, EXPORT_EXCEL, params, deliver)
