"""Command line entry points: quotes, pickup checks, export reports, prep lists and labor totals."""
import json
from pathlib import Path

import click

from order_desk.config.settings import get_settings
from order_desk.engine import LineItem, Order, calculate_order
from order_desk.engine.models import Employee, WorkShift
from order_desk.exceptions import OrderDeskError
from order_desk.reports.labor import labor_summary, log_shift
from order_desk.reports.order_reports import (
    active_orders,
    filter_orders_by_date,
    financial_summary,
    monthly_pnl,
)
from order_desk.reports.prep_list import build_prep_list
from order_desk.scheduling import ValidInstant, parse_instant, parse_order_instant
from order_desk.scheduling.formatting import format_time_12_hour


def _parse_items(raw: str) -> list[LineItem]:
    """Parse 'Beef:12,Full Chicken:6' into LineItem list."""
    items: list[LineItem] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'Name:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{name}'."
            )
        items.append(LineItem(name=name.strip(), quantity=qty))
    return items


def load_orders(path: Path) -> list[Order]:
    """Map stored order documents (camelCase keys) onto Order records."""
    with open(path, 'r', encoding='utf-8') as f:
        documents = json.load(f)

    return [
        Order(
            id=str(doc.get('id', '')),
            pickup_date=doc.get('pickupDate'),
            pickup_time=doc.get('pickupTime'),
            customer_name=doc.get('customerName', ''),
            items=[LineItem(name=i['name'], quantity=i.get('quantity')) for i in doc.get('items', [])],
            total_mini=doc.get('totalMini') or 0,
            total_full_size=doc.get('totalFullSize') or 0,
            amount_charged=doc.get('amountCharged') or 0.0,
            delivery_fee=doc.get('deliveryFee') or 0.0,
            total_cost=doc.get('totalCost'),
            approval_status=doc.get('approvalStatus', 'Pending Approval'),
        )
        for doc in documents
    ]


def load_shifts(path: Path) -> list[WorkShift]:
    """Map stored shift documents (camelCase keys) onto WorkShift records."""
    with open(path, 'r', encoding='utf-8') as f:
        documents = json.load(f)

    return [
        WorkShift(
            id=str(doc.get('id', '')),
            employee_id=str(doc.get('employeeId', '')),
            employee_name=doc.get('employeeName') or 'Unknown',
            date=doc.get('date', ''),
            start_time=doc.get('startTime', ''),
            end_time=doc.get('endTime', ''),
            hours=float(doc.get('hours') or 0),
            hourly_wage=float(doc.get('hourlyWage') or 0),
            total_pay=float(doc.get('totalPay') or 0),
            notes=doc.get('notes', ''),
        )
        for doc in documents
    ]


@click.group()
def cli() -> None:
    """Order Desk - pricing and pickup scheduling tools"""


@cli.command("quote")
@click.option("--items", required=True, help="Items as 'Name:Qty,Name:Qty'.")
@click.option("--delivery-fee", default=0.0, type=float, help="Delivery fee to add.")
@click.option("--trace", is_flag=True, help="Show pricing steps.")
def quote_command(items: str, delivery_fee: float, trace: bool) -> None:
    """Price an order with the current price list."""
    try:
        settings = get_settings()
    except OrderDeskError as exc:
        raise click.ClickException(str(exc))

    quote = calculate_order(_parse_items(items), delivery_fee, settings.pricing, settings.menu)

    click.echo(f"Minis: {quote.mini_quantity}  ${quote.mini_total:.2f}")
    click.echo(f"Full-size: {quote.full_quantity}  ${quote.full_total:.2f}")
    click.echo(f"Salsa: {quote.small_salsa_quantity + quote.large_salsa_quantity}  ${quote.salsa_total:.2f}")
    if quote.delivery_fee:
        click.echo(f"Delivery: ${quote.delivery_fee:.2f}")
    click.echo(f"Total: ${quote.total:.2f}")
    for warning in quote.warnings:
        click.echo(f"Warning: {warning}", err=True)
    if trace:
        click.echo()
        click.echo(quote.get_trace_text())


@cli.command("when")
@click.argument("pickup_date")
@click.argument("pickup_time", required=False, default="")
def when_command(pickup_date: str, pickup_time: str) -> None:
    """Show how a stored pickup date and time are read."""
    instant = parse_instant(pickup_date, pickup_time)
    if not isinstance(instant, ValidInstant):
        raise click.ClickException(f"Invalid pickup date: {pickup_date!r}")
    click.echo(f"{instant.at:%Y-%m-%d} {format_time_12_hour(instant.at)}")


@cli.command("report")
@click.argument("orders_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--start", default=None, help="First pickup day, YYYY-MM-DD.")
@click.option("--end", default=None, help="Last pickup day, YYYY-MM-DD.")
def report_command(orders_file: Path, start: str, end: str) -> None:
    """Reprice an orders export and summarize profit and loss."""
    try:
        settings = get_settings()
        orders = active_orders(load_orders(orders_file))
        in_range = filter_orders_by_date(orders, start, end)
    except OrderDeskError as exc:
        raise click.ClickException(str(exc))
    except (ValueError, KeyError) as exc:
        raise click.ClickException(f"Could not read {orders_file}: {exc}")

    click.echo("Pickup dates needing review:")
    invalid = [o for o in orders if not isinstance(parse_order_instant(o), ValidInstant)]
    for order in invalid:
        click.echo(f"  {order.id} {order.customer_name}: {order.pickup_date!r} {order.pickup_time!r}")
    if not invalid:
        click.echo("  none")

    click.echo("Stored charges that differ from current pricing:")
    mismatches = 0
    for order in orders:
        quote = calculate_order(order.items, order.delivery_fee, settings.pricing, settings.menu)
        if abs(quote.total - order.amount_charged) >= 0.01:
            mismatches += 1
            click.echo(f"  {order.id}: stored ${order.amount_charged:.2f}, current ${quote.total:.2f}")
    if not mismatches:
        click.echo("  none")

    summary = financial_summary(in_range, [])
    click.echo()
    click.echo(f"Orders: {len(in_range)}")
    click.echo(f"Revenue: ${summary['revenue']:,.2f}")
    click.echo(f"Net profit: ${summary['net_profit']:,.2f} ({summary['margin']:.1f}%)")
    pnl = monthly_pnl(in_range, [])
    if not pnl.empty:
        click.echo()
        click.echo(pnl.to_string(index=False))


@cli.command("prep")
@click.argument("orders_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--date", "pickup_day", default=None, help="Pickup day to prepare, YYYY-MM-DD.")
def prep_command(orders_file: Path, pickup_day: str) -> None:
    """Empanada counts and filling pounds for approved orders."""
    try:
        settings = get_settings()
        orders = filter_orders_by_date(active_orders(load_orders(orders_file)), pickup_day, pickup_day)
    except OrderDeskError as exc:
        raise click.ClickException(str(exc))
    except (ValueError, KeyError) as exc:
        raise click.ClickException(f"Could not read {orders_file}: {exc}")

    prep = build_prep_list(orders, settings.prep)
    click.echo(f"Minis: {prep.total_mini}  Full-size: {prep.total_full}")
    if prep.rows.empty:
        click.echo("Nothing to prep.")
        return
    for row in prep.rows.itertuples(index=False):
        click.echo(f"  {row.flavor}: {row.mini_qty} mini, {row.full_qty} full, {row.total_lbs:.2f} lbs")
    click.echo(f"Total filling: {prep.total_lbs:.2f} lbs")


@cli.command("shift")
@click.argument("start_time")
@click.argument("end_time")
@click.option("--employee", "employee_id", default=None, help="Employee id from settings.")
@click.option("--wage", type=float, default=None, help="Hourly wage; overrides the employee's.")
def shift_command(start_time: str, end_time: str, employee_id: str, wage: float) -> None:
    """Hours and pay for a same-day HH:MM shift."""
    try:
        settings = get_settings()
    except OrderDeskError as exc:
        raise click.ClickException(str(exc))

    employee = settings.find_employee(employee_id) if employee_id else None
    if employee_id and employee is None:
        raise click.ClickException(f"Unknown employee: {employee_id}")
    if employee is None:
        employee = Employee(id="", name="", hourly_wage=settings.labor_wage)
    if wage is not None:
        employee = Employee(id=employee.id, name=employee.name, hourly_wage=wage)

    try:
        shift = log_shift(employee, start_time, end_time)
    except OrderDeskError as exc:
        raise click.ClickException(str(exc))
    click.echo(f"{shift.hours:.2f} h at ${shift.hourly_wage:.2f}/h = ${shift.total_pay:.2f}")


@cli.command("labor")
@click.argument("shifts_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def labor_command(shifts_file: Path) -> None:
    """Total hours and pay per employee from a shifts export."""
    try:
        shifts = load_shifts(shifts_file)
    except (ValueError, KeyError) as exc:
        raise click.ClickException(f"Could not read {shifts_file}: {exc}")

    summary = labor_summary(shifts)
    if summary.empty:
        click.echo("No shifts.")
        return
    click.echo(summary.to_string(index=False))
    click.echo(f"Total pay: ${summary['pay'].sum():,.2f}")
