# crud/customer.py
from __future__ import annotations

from typing import Optional, List, Dict, Any

from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from models.customer import Customer


def _escape_like(value: str) -> str:
    # % and _ in the query are literal characters, not wildcards
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def create(db: Session, data: Dict[str, Any]) -> Customer:
    """단건 insert. id / created_at 은 DB 가 채운다."""
    obj = Customer(
        first_name=data["first_name"],
        last_name=data["last_name"],
        account_number=data["account_number"],
        amount=data["amount"],
        created_by=data.get("created_by"),
        phone_number=data.get("phone_number"),
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def search(db: Session, query: Optional[str] = None) -> List[Customer]:
    """
    이름 / 성 / 계좌번호 ILIKE 부분 매칭.
    - 빈 문자열(공백 포함)이면 전체 목록
    - 최신 등록순 (created_at desc, id desc)
    """
    stmt = select(Customer)

    q = (query or "").strip()
    if q:
        pattern = f"%{_escape_like(q)}%"
        stmt = stmt.where(
            or_(
                Customer.first_name.ilike(pattern, escape="\\"),
                Customer.last_name.ilike(pattern, escape="\\"),
                Customer.account_number.ilike(pattern, escape="\\"),
            )
        )

    stmt = stmt.order_by(Customer.created_at.desc(), Customer.id.desc())
    return db.execute(stmt).scalars().all()


def remove(db: Session, customer_id: int) -> None:
    # no existence check: deleting a missing id is a no-op
    db.execute(delete(Customer).where(Customer.id == customer_id))
    db.commit()


def ping(db: Session) -> None:
    db.execute(select(Customer.id).limit(1)).first()
