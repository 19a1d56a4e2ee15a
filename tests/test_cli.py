"""Tests for the command line interface."""
import json

from click.testing import CliRunner

from order_desk.cli import cli
from order_desk.engine.models import Employee, PrepSettings


def test_quote(active_settings):
    result = CliRunner().invoke(cli, ["quote", "--items", "Beef:15,Chicken:10", "--delivery-fee", "5"])
    assert result.exit_code == 0, result.output
    assert "Total: $43.75" in result.output


def test_quote_with_trace(active_settings):
    result = CliRunner().invoke(cli, ["quote", "--items", "Full Beef:2", "--trace"])
    assert result.exit_code == 0, result.output
    assert "Total: $6.00" in result.output
    assert "Full Pricing" in result.output


def test_quote_bad_item_format(active_settings):
    result = CliRunner().invoke(cli, ["quote", "--items", "Beef"])
    assert result.exit_code != 0
    assert "Expected 'Name:Quantity'" in result.output


def test_when():
    result = CliRunner().invoke(cli, ["when", "3/5/2024", "2:30"])
    assert result.exit_code == 0
    assert result.output.strip() == "2024-03-05 2:30 PM"


def test_when_invalid_date():
    result = CliRunner().invoke(cli, ["when", "soon"])
    assert result.exit_code == 1
    assert "Invalid pickup date" in result.output


def test_report(active_settings, tmp_path):
    export = tmp_path / 'orders.json'
    export.write_text(json.dumps([
        {"id": "a", "pickupDate": "2024-03-05", "pickupTime": "2pm", "customerName": "Ana",
         "items": [{"name": "Beef", "quantity": 10}], "amountCharged": 15.0,
         "approvalStatus": "Approved"},
        {"id": "b", "pickupDate": "", "pickupTime": "", "customerName": "Ben",
         "items": [{"name": "Beef", "quantity": 2}], "amountCharged": 1.0,
         "approvalStatus": "Approved"},
        {"id": "c", "pickupDate": "2024-03-06", "pickupTime": "", "customerName": "Cy",
         "items": [], "amountCharged": 500.0, "approvalStatus": "Denied"},
    ]), encoding='utf-8')

    result = CliRunner().invoke(cli, ["report", str(export), "--start", "2024-03-01"])

    assert result.exit_code == 0, result.output
    assert "b Ben" in result.output
    assert "b: stored $1.00, current $3.50" in result.output
    assert "Orders: 1" in result.output
    assert "Revenue: $15.00" in result.output


def test_prep(active_settings, tmp_path):
    active_settings.prep = PrepSettings(lbs_per_20={"Beef": 1.5, "Chicken": 1.0})
    export = tmp_path / 'orders.json'
    export.write_text(json.dumps([
        {"id": "a", "pickupDate": "2024-03-05", "pickupTime": "2pm", "approvalStatus": "Approved",
         "items": [{"name": "Beef", "quantity": 20}, {"name": "Full Chicken", "quantity": 10}]},
        {"id": "b", "pickupDate": "2024-03-06", "pickupTime": "2pm", "approvalStatus": "Approved",
         "items": [{"name": "Beef", "quantity": 40}]},
        {"id": "c", "pickupDate": "2024-03-05", "pickupTime": "2pm", "approvalStatus": "Pending Approval",
         "items": [{"name": "Beef", "quantity": 100}]},
    ]), encoding='utf-8')

    result = CliRunner().invoke(cli, ["prep", str(export), "--date", "2024-03-05"])

    assert result.exit_code == 0, result.output
    assert "Minis: 20  Full-size: 10" in result.output
    assert "Beef: 20 mini, 0 full, 1.50 lbs" in result.output
    assert "Chicken: 0 mini, 10 full, 1.00 lbs" in result.output
    assert "Total filling: 2.50 lbs" in result.output


def test_prep_nothing_scheduled(active_settings, tmp_path):
    export = tmp_path / 'orders.json'
    export.write_text("[]", encoding='utf-8')
    result = CliRunner().invoke(cli, ["prep", str(export)])
    assert result.exit_code == 0, result.output
    assert "Nothing to prep." in result.output


def test_shift_uses_employee_wage(active_settings):
    active_settings.employees = (Employee(id="e1", name="Ana", hourly_wage=20.0),)
    result = CliRunner().invoke(cli, ["shift", "09:00", "12:30", "--employee", "e1"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "3.50 h at $20.00/h = $70.00"


def test_shift_default_and_explicit_wage(active_settings):
    active_settings.labor_wage = 15.0
    assert "= $30.00" in CliRunner().invoke(cli, ["shift", "09:00", "11:00"]).output
    assert "= $24.00" in CliRunner().invoke(cli, ["shift", "09:00", "11:00", "--wage", "12"]).output


def test_shift_rejects_backwards_times(active_settings):
    result = CliRunner().invoke(cli, ["shift", "17:00", "09:00"])
    assert result.exit_code == 1
    assert "Invalid start or end time" in result.output


def test_shift_unknown_employee(active_settings):
    result = CliRunner().invoke(cli, ["shift", "09:00", "10:00", "--employee", "zz"])
    assert result.exit_code == 1
    assert "Unknown employee: zz" in result.output


def test_labor(tmp_path):
    export = tmp_path / 'shifts.json'
    export.write_text(json.dumps([
        {"id": "1", "employeeId": "e1", "employeeName": "Ana", "date": "2024-03-05",
         "startTime": "09:00", "endTime": "13:00", "hours": 4, "hourlyWage": 15, "totalPay": 60},
        {"id": "2", "employeeId": "e2", "employeeName": "Ben", "hours": 2, "totalPay": 40},
        {"id": "3", "employeeId": "e1", "employeeName": "Ana", "hours": 1, "totalPay": 15},
    ]), encoding='utf-8')

    result = CliRunner().invoke(cli, ["labor", str(export)])

    assert result.exit_code == 0, result.output
    assert "Ana" in result.output
    assert "Total pay: $115.00" in result.output
