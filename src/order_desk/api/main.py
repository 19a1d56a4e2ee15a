import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from order_desk.config.settings import get_settings
from order_desk.engine import LineItem, Order, calculate_order
from order_desk.engine.models import ApprovalStatus, Expense, FollowUpStatus, PaymentStatus
from order_desk.reports.order_reports import (
    dashboard_stats,
    filter_expenses_by_date,
    filter_orders_by_date,
    financial_summary,
)
from order_desk.reports.labor import shift_hours, shift_pay
from order_desk.reports.prep_list import build_prep_list
from order_desk.scheduling import ValidInstant, parse_instant
from order_desk.scheduling.holidays import get_us_holidays

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Order Desk API",
    description="Order pricing, pickup time parsing and reports",
    version="1.0.0"
)

# Enable CORS for the dashboard frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ItemIn(BaseModel):
    name: str
    quantity: Optional[int] = 0


class TotalRequest(BaseModel):
    items: List[ItemIn]
    delivery_fee: Optional[float] = 0


class InstantRequest(BaseModel):
    pickup_date: Optional[str] = None
    pickup_time: Optional[str] = None


class OrderIn(BaseModel):
    id: str
    pickup_date: Optional[str] = None
    pickup_time: Optional[str] = None
    customer_name: str = ""
    items: List[ItemIn] = []
    total_mini: int = 0
    total_full_size: int = 0
    amount_charged: float = 0.0
    delivery_fee: float = 0.0
    total_cost: Optional[float] = None
    follow_up_status: FollowUpStatus = FollowUpStatus.NEEDED
    payment_status: PaymentStatus = PaymentStatus.PENDING
    approval_status: ApprovalStatus = ApprovalStatus.PENDING

    def to_order(self) -> Order:
        return Order(
            id=self.id,
            pickup_date=self.pickup_date,
            pickup_time=self.pickup_time,
            customer_name=self.customer_name,
            items=[LineItem(name=i.name, quantity=i.quantity) for i in self.items],
            total_mini=self.total_mini,
            total_full_size=self.total_full_size,
            amount_charged=self.amount_charged,
            delivery_fee=self.delivery_fee,
            total_cost=self.total_cost,
            follow_up_status=self.follow_up_status,
            payment_status=self.payment_status,
            approval_status=self.approval_status,
        )


class ExpenseIn(BaseModel):
    date: str
    amount: float
    category: str
    description: str = ""


class SummaryRequest(BaseModel):
    orders: List[OrderIn] = []
    expenses: List[ExpenseIn] = []
    start: Optional[str] = None
    end: Optional[str] = None


class PrepRequest(BaseModel):
    orders: List[OrderIn] = []


class ShiftRequest(BaseModel):
    start_time: str
    end_time: str
    hourly_wage: Optional[float] = None
    employee_id: Optional[str] = None


@app.get("/")
async def root():
    return {"status": "online", "message": "Order Desk API Active"}


@app.get("/pricing")
async def get_pricing():
    return get_settings().pricing.to_dict()


@app.post("/orders/total")
async def order_total(req: TotalRequest):
    try:
        settings = get_settings()
        items = [LineItem(name=i.name, quantity=i.quantity) for i in req.items]
        quote = calculate_order(items, req.delivery_fee, settings.pricing, settings.menu)
        return jsonable_encoder(quote)
    except Exception as e:
        logger.exception("Order total failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/orders/instant")
async def order_instant(req: InstantRequest):
    instant = parse_instant(req.pickup_date, req.pickup_time)
    if isinstance(instant, ValidInstant):
        return {"valid": True, "instant": instant.at.isoformat()}
    return {"valid": False, "instant": None}


@app.get("/holidays/{year}")
async def holidays(year: int):
    if not 1 <= year <= 9999:
        raise HTTPException(status_code=400, detail=f"Year out of range: {year}")
    return [{"date": h.date.isoformat(), "name": h.name} for h in get_us_holidays(year)]


@app.post("/reports/summary")
async def report_summary(req: SummaryRequest):
    try:
        orders = filter_orders_by_date([o.to_order() for o in req.orders], req.start, req.end)
        expenses = filter_expenses_by_date(
            [Expense(**e.model_dump()) for e in req.expenses], req.start, req.end
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        return {
            "order_count": len(orders),
            "stats": dashboard_stats(orders),
            "financials": financial_summary(orders, expenses),
        }
    except Exception as e:
        logger.exception("Report summary failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/reports/prep")
async def report_prep(req: PrepRequest):
    try:
        prep = build_prep_list([o.to_order() for o in req.orders], get_settings().prep)
        return {
            "total_mini": prep.total_mini,
            "total_full": prep.total_full,
            "total_lbs": prep.total_lbs,
            "rows": prep.rows.to_dict(orient="records"),
        }
    except Exception as e:
        logger.exception("Prep list failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/labor/shift")
async def labor_shift(req: ShiftRequest):
    """Hours and pay for a shift at the requested wage, else the employee's, else the default."""
    settings = get_settings()
    wage = req.hourly_wage
    if wage is None and req.employee_id is not None:
        employee = settings.find_employee(req.employee_id)
        if employee is None:
            raise HTTPException(status_code=404, detail=f"Unknown employee: {req.employee_id}")
        wage = employee.hourly_wage
    if wage is None:
        wage = settings.labor_wage

    return {
        "hours": shift_hours(req.start_time, req.end_time),
        "hourly_wage": wage,
        "total_pay": shift_pay(req.start_time, req.end_time, wage),
    }
