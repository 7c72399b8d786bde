import pytest

from wood_inventory.core.exceptions import ApiError, UnauthorizedError
from wood_inventory.services import report_service
from wood_inventory.services.report_service import ReportDownload


@pytest.fixture(autouse=True)
def fixed_clock(monkeypatch):
    monkeypatch.setattr(report_service, "_timestamp_millis", lambda: 1704412800000)


def test_get_stock_movement_passes_params(client, backend):
    backend.add("GET", "/reports/stock-movement", json={"in": 40, "out": 12})
    result = report_service.get_stock_movement(client, {"startDate": "2024-01-01"})
    assert result == {"in": 40, "out": 12}
    assert backend.last_query() == {"startDate": ["2024-01-01"]}


def test_get_supplier_performance(client, backend):
    backend.add("GET", "/reports/supplier-performance", json=[{"supplier": "Lanka Timber"}])
    assert report_service.get_supplier_performance(client) == [{"supplier": "Lanka Timber"}]


def test_export_pdf_delivers_named_download(client, backend):
    backend.add(
        "GET",
        "/reports/stock-movement/pdf",
        body=b"%PDF-1.7 report",
        headers={"Content-Type": "application/pdf"},
    )
    delivered = []

    result = report_service.export_pdf(
        client, "stock-movement", {"startDate": "2024-01-01"}, deliver=delivered.append
    )

    assert result is None
    assert delivered == [
        ReportDownload(
            filename="stock-movement_report_1704412800000.pdf",
            content=b"%PDF-1.7 report",
            mime_type="application/pdf",
        )
    ]
    assert backend.last.headers["Accept"] == "application/octet-stream"
    assert backend.last_query() == {"startDate": ["2024-01-01"]}


def test_export_excel_uses_xlsx_extension(client, backend):
    backend.add("GET", "/reports/supplier-performance/excel", body=b"PK\x03\x04")
    delivered = []
    report_service.export_excel(client, "supplier-performance", deliver=delivered.append)
    assert delivered[0].filename == "supplier-performance_report_1704412800000.xlsx"
    assert delivered[0].content == b"PK\x03\x04"


def test_failed_export_raises_before_delivery(client, backend):
    backend.add("GET", "/reports/stock-movement/pdf", status=500, json={"message": "boom"})
    delivered = []
    with pytest.raises(ApiError):
        report_service.export_pdf(client, "stock-movement", deliver=delivered.append)
    assert delivered == []


def test_export_with_expired_token_clears_session_without_delivery(client, backend, logged_in):
    backend.add("GET", "/reports/stock-movement/pdf", status=401, json={"message": "jwt expired"})
    delivered = []

    with pytest.raises(UnauthorizedError) as excinfo:
        report_service.export_pdf(client, "stock-movement", deliver=delivered.append)

    assert excinfo.value.redirect_to == "/login"
    assert delivered == []
    assert "token" not in logged_in
    assert "user" not in logged_in


def test_default_delivery_writes_to_download_dir(client, backend, tmp_path, monkeypatch):
    monkeypatch.setenv("API_URL", "http://backend.test/api")
    monkeypatch.setenv("DOWNLOAD_DIR", str(tmp_path / "reports"))
    backend.add("GET", "/reports/stock-movement/excel", body=b"xlsx-bytes")

    report_service.export_excel(client, "stock-movement")

    saved = tmp_path / "reports" / "stock-movement_report_1704412800000.xlsx"
    assert saved.read_bytes() == b"xlsx-bytes"


def test_build_filename():
    assert report_service.build_filename("inventory", "pdf") == "inventory_report_1704412800000.pdf"
