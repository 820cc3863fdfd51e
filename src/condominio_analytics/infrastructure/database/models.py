"""Modelos SQLAlchemy (solo lectura) sobre las tablas existentes."""
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Clase base para modelos."""
    pass


class Property(Base):
    """Modelo de propiedades (unidades del conjunto)."""
    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    property_number: Mapped[str] = mapped_column("propertyNumber", String(255), unique=True)
    owner_name: Mapped[str] = mapped_column("ownerName", String(255))
    contact_email: Mapped[str | None] = mapped_column("contactEmail", String(255), nullable=True)
    contact_phone: Mapped[str | None] = mapped_column("contactPhone", String(255), nullable=True)
    parking_spaces: Mapped[int] = mapped_column("parkingSpaces", Integer, default=0)
    status: Mapped[str] = mapped_column(String(20), default="active")
    created_at: Mapped[datetime | None] = mapped_column("createdAt", DateTime, nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column("updatedAt", DateTime, nullable=True)

    # Relaciones
    payments: Mapped[list["Payment"]] = relationship(back_populates="property")


class Payment(Base):
    """Modelo de pagos."""
    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    property_id: Mapped[int] = mapped_column("propertyId", Integer, ForeignKey("properties.id"))
    concept: Mapped[str] = mapped_column(String(20))
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    payment_date: Mapped[date] = mapped_column("paymentDate", Date)
    reference_month: Mapped[int] = mapped_column("referenceMonth", Integer)
    reference_year: Mapped[int] = mapped_column("referenceYear", Integer)
    payment_method: Mapped[str] = mapped_column("paymentMethod", String(20))
    receipt_path: Mapped[str | None] = mapped_column("receiptPath", String(255), nullable=True)
    observations: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime | None] = mapped_column("createdAt", DateTime, nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column("updatedAt", DateTime, nullable=True)

    # Relaciones
    property: Mapped["Property"] = relationship(back_populates="payments")
