import io
import subprocess
from unittest import mock

import pytest

from sarcshop.payment import (
    DEFAULT_UPI,
    UPIInfo,
    UPIRegistry,
    admin_upi_manager,
    build_upi_url,
    generate_qr,
    qr_with_timer,
)


def scripted(*answers):
    pending = list(answers)

    def fake_input(prompt=""):
        if not pending:
            raise EOFError
        return pending.pop(0)

    return fake_input


@pytest.fixture
def upi_file(tmp_path):
    path = tmp_path / "upi_ids.dat"
    path.write_text("low@upi 0 100\nhigh@upi 100.5 5000\n", encoding="utf-8")
    return path


def test_first_matching_range_wins(upi_file):
    registry = UPIRegistry(upi_file)
    assert registry.upi_for_amount(50) == "low@upi"
    assert registry.upi_for_amount(100) == "low@upi"
    assert registry.upi_for_amount(1000) == "high@upi"


def test_fallback_when_no_range_covers(upi_file):
    registry = UPIRegistry(upi_file)
    assert registry.upi_for_amount(100.2) == DEFAULT_UPI
    assert registry.upi_for_amount(99999) == "default@ybl"


def test_missing_file_means_no_entries(tmp_path):
    registry = UPIRegistry(tmp_path / "none.dat")
    assert registry.entries() == []
    assert registry.upi_for_amount(10) == DEFAULT_UPI


def test_malformed_record_stops_reading(tmp_path):
    path = tmp_path / "upi.dat"
    path.write_text("a@upi 1 2\nb@upi x 3\nc@upi 4 5\n", encoding="utf-8")
    assert [e.upi_id for e in UPIRegistry(path).entries()] == ["a@upi"]


def test_add_round_trips_through_file(tmp_path):
    path = tmp_path / "upi.dat"
    UPIRegistry(path).add("a@upi", 1, 500)
    UPIRegistry(path).add("b@upi", 501, 1000.5)
    assert UPIRegistry(path).entries() == [
        UPIInfo("a@upi", 1.0, 500.0),
        UPIInfo("b@upi", 501.0, 1000.5),
    ]


def test_remove(upi_file):
    registry = UPIRegistry(upi_file)
    assert registry.remove("low@upi") is True
    assert [e.upi_id for e in UPIRegistry(upi_file).entries()] == ["high@upi"]
    assert registry.remove("missing@upi") is False
    assert [e.upi_id for e in registry.entries()] == ["high@upi"]


def test_render_lists_ranges(upi_file):
    text = UPIRegistry(upi_file).render()
    assert text.startswith("\n📋 UPI Ranges:\n")
    assert "- low@upi : ₹0 - ₹100\n" in text
    assert "- high@upi : ₹100.5 - ₹5000\n" in text


def test_build_upi_url():
    assert build_upi_url("shop@upi", 100) == "upi://pay?pa=shop@upi&pn=SARCShop&am=100.000000&cu=INR"


def test_generate_qr_logs_and_draws(tmp_path):
    log = tmp_path / "qr.txt"
    out = io.StringIO()
    done = subprocess.CompletedProcess(args=[], returncode=0, stdout="<QR>\n", stderr="")
    with mock.patch("subprocess.run", return_value=done) as run:
        url = generate_qr("shop@upi", 25, log, out)
    assert url == build_upi_url("shop@upi", 25)
    assert log.read_text(encoding="utf-8") == url + "\n"
    assert run.call_args.kwargs["input"] == url + "\n"
    assert run.call_args.args[0] == ["qrencode", "-t", "ANSIUTF8"]
    assert "<QR>\n" in out.getvalue()
    assert "Scan QR to pay ₹25./" in out.getvalue()


def test_generate_qr_appends_to_log(tmp_path):
    log = tmp_path / "qr.txt"
    done = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
    with mock.patch("subprocess.run", return_value=done):
        first = generate_qr("a@upi", 1, log, io.StringIO())
        second = generate_qr("b@upi", 2, log, io.StringIO())
    assert log.read_text(encoding="utf-8").splitlines() == [first, second]


def test_generate_qr_without_tool_shows_link(tmp_path):
    out = io.StringIO()
    with mock.patch("subprocess.run", side_effect=FileNotFoundError):
        url = generate_qr("shop@upi", 10, tmp_path / "qr.txt", out)
    assert url in out.getvalue()


def test_qr_with_timer_waits_and_expires(tmp_path):
    out = io.StringIO()
    naps = []
    done = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
    with mock.patch("subprocess.run", return_value=done):
        qr_with_timer("shop@upi", 5, tmp_path / "qr.txt", 4, out, naps.append)
    assert naps == [1, 1, 1, 1]
    assert "expire in 4 seconds...\n..\n🚫 QR Code expired!" in out.getvalue()


def test_manager_add_retries_after_bad_number(tmp_path):
    registry = UPIRegistry(tmp_path / "upi.dat")
    out = io.StringIO()
    admin_upi_manager(
        registry,
        scripted("1", "x@upi", "abc", "x@upi", "0", "200", "4"),
        out,
    )
    assert registry.entries() == [UPIInfo("x@upi", 0.0, 200.0)]
    assert "Invalid input" in out.getvalue()
    assert "✅ UPI added successfully." in out.getvalue()


def test_manager_remove_view_and_invalid_choice(upi_file):
    registry = UPIRegistry(upi_file)
    out = io.StringIO()
    admin_upi_manager(registry, scripted("2", "low@upi", "3", "8", "4"), out)
    text = out.getvalue()
    assert [e.upi_id for e in UPIRegistry(upi_file).entries()] == ["high@upi"]
    assert "low@upi :" not in text
    assert "- high@upi :" in text
    assert "❌ Invalid choice." in text


def test_manager_ends_on_end_of_input(tmp_path):
    registry = UPIRegistry(tmp_path / "upi.dat")
    out = io.StringIO()
    admin_upi_manager(registry, scripted("1", "y@upi"), out)
    assert registry.entries() == []
    assert out.getvalue().count("ADMIN UPI MANAGER") == 1