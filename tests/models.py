"""
SQLAlchemy models used by the test suite.

Only mapper metadata is inspected; no tables are ever created.
"""

import uuid
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import BigInteger, Enum, Identity, Integer, Sequence, SmallInteger, String, Text, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, column_property, composite, mapped_column


class Base(DeclarativeBase):
    pass


class OtherBase(DeclarativeBase):
    pass


class Customer(Base):
    """Database assigns the id (single integer primary key, autoincrement)."""
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(40))
    nickname: Mapped[Optional[str]] = mapped_column(String(2))
    notes: Mapped[Optional[str]] = mapped_column(Text)
    visits: Mapped[int] = mapped_column(Integer, default=0)
    shout: Mapped[str] = column_property(name + "!")


class Invoice(Base):
    """Application assigns a 64-bit id."""
    __tablename__ = "invoices"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    number: Mapped[str] = mapped_column(String(12), unique=True)
    total: Mapped[int] = mapped_column(Integer)


class Ticket(Base):
    """Application assigns a 32-bit id."""
    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)


class Country(Base):
    """Application assigns a short string id."""
    __tablename__ = "countries"

    code: Mapped[str] = mapped_column(String(2), primary_key=True)
    name: Mapped[str] = mapped_column(String(60))


class ApiToken(Base):
    """String id filled in by a client-side default."""
    __tablename__ = "api_tokens"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))


class Payment(Base):
    """Id drawn from a database sequence."""
    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(BigInteger, Sequence("payment_id_seq"), primary_key=True)


class Refund(Base):
    """Id from an identity column."""
    __tablename__ = "refunds"

    id: Mapped[int] = mapped_column(Integer, Identity(), primary_key=True)


class Order(Base):
    """Assigned id with an enumerated status column."""
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    status: Mapped[str] = mapped_column(Enum("new", "paid", "shipped", name="order_status"))


class Device(Base):
    """Assigned UUID id stored as a string."""
    __tablename__ = "devices"

    id: Mapped[str] = mapped_column(Uuid(as_uuid=False), primary_key=True)
    serial: Mapped[str] = mapped_column(String(16))


class Booking(Base):
    """Primary key column renamed in the database."""
    __tablename__ = "bookings"

    ident: Mapped[int] = mapped_column("booking_id", BigInteger, primary_key=True, autoincrement=False)


@dataclass
class LineKey:
    order_number: int
    position: int


class OrderLine(Base):
    """Composite (embedded) primary key."""
    __tablename__ = "order_lines"

    order_ref: Mapped[int] = mapped_column("order_no", BigInteger, primary_key=True)
    line_ref: Mapped[int] = mapped_column("line_no", SmallInteger, primary_key=True)
    key: Mapped[LineKey] = composite("order_ref", "line_ref")
    quantity: Mapped[int] = mapped_column(Integer)


class Vehicle(Base):
    """Single-table inheritance root with an assigned id."""
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    kind: Mapped[str] = mapped_column(String(20))

    __mapper_args__ = {"polymorphic_on": "kind", "polymorphic_identity": "vehicle"}


class Truck(Vehicle):
    __mapper_args__ = {"polymorphic_identity": "truck"}


class AssignedIdMixin:
    """Unmapped superclass declaring the id."""
    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)


class Shipment(AssignedIdMixin, Base):
    __tablename__ = "shipments"

    label: Mapped[str] = mapped_column(String(30))


class Warehouse(OtherBase):
    """Mapped, but in a different registry."""
    __tablename__ = "warehouses"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)


class PlainRecord:
    """Not mapped at all."""
    id: int = 0
