# catalog_gateway/db/models.py
from sqlalchemy import Column, Integer, String, Text, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from catalog_gateway.db.database import Base, AnalyticsBase


# Transactional store

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # sha256 hex digest
    address = Column(Text)
    phone = Column(String(50))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"))
    total_amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    status = Column(String(50), server_default="pending")
    payment_method = Column(String(50))
    shipping_address = Column(Text)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())

    items = relationship("OrderItem", back_populates="order")


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"))
    product_id = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    order = relationship("Order", back_populates="items")


# No unique (user_id, product_id) constraint, see cart.add_to_cart
class CartItem(Base):
    __tablename__ = "cart"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"))
    product_id = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())


# Analytics store

class Inventory(AnalyticsBase):
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(String(100), unique=True, nullable=False)
    quantity = Column(Integer, nullable=False, server_default="0")
    warehouse_location = Column(String(255))
    last_restocked = Column(DateTime, server_default=func.now())
    low_stock_threshold = Column(Integer, server_default="10")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())


class SalesAnalytics(AnalyticsBase):
    __tablename__ = "sales_analytics"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(String(100), nullable=False)
    quantity_sold = Column(Integer, nullable=False)
    revenue = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    sale_date = Column(Date, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
