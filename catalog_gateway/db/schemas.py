# catalog_gateway/db/schemas.py
# Request bodies decode missing fields to zero values; only wrong types are rejected.
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime, date


class Message(BaseModel):
    message: str


# Users; password is accepted on create and never part of a response model
class UserBase(BaseModel):
    name: str = ""
    email: str = ""
    address: Optional[str] = None
    phone: Optional[str] = None


class UserCreate(UserBase):
    password: str = ""


class UserUpdate(UserBase):
    pass


class User(UserBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Orders
class OrderItemBase(BaseModel):
    product_id: str = ""
    quantity: int = 0
    price: float = 0.0


class OrderItem(OrderItemBase):
    id: int
    order_id: int

    class Config:
        from_attributes = True


class OrderBase(BaseModel):
    user_id: int = 0
    total_amount: float = 0.0
    status: str = "pending"
    payment_method: Optional[str] = None
    shipping_address: Optional[str] = None


class OrderCreate(OrderBase):
    items: List[OrderItemBase] = []


class Order(OrderBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Single-order fetch and creation carry the items, lists do not
class OrderDetail(Order):
    items: List[OrderItem] = []


class OrderStatusUpdate(BaseModel):
    status: str = ""


# Cart
class CartItemCreate(BaseModel):
    product_id: str = ""
    quantity: int = 1


class CartItem(BaseModel):
    id: int
    user_id: int
    product_id: str
    quantity: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Inventory and analytics
class InventoryUpdate(BaseModel):
    quantity: int = 0
    warehouse_location: Optional[str] = None


class RestockRequest(BaseModel):
    quantity: int = 0


class Inventory(BaseModel):
    id: int
    product_id: str
    quantity: int
    warehouse_location: Optional[str] = None
    last_restocked: Optional[datetime] = None
    low_stock_threshold: int = 10
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SalesAnalytics(BaseModel):
    id: int
    product_id: str
    quantity_sold: int
    revenue: float
    sale_date: date
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PopularProduct(BaseModel):
    product_id: str
    total_sold: int
    total_revenue: float

    class Config:
        from_attributes = True


class RevenueStats(BaseModel):
    date: str
    daily_revenue: float
    products_sold: int


# Documents; ids are ObjectId hex strings
class ProductBase(BaseModel):
    name: str = ""
    description: str = ""
    price: float = 0.0
    category: str = ""
    brand: str = ""
    image_url: str = ""
    rating: float = 0.0
    tags: List[str] = []


class Product(ProductBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryBase(BaseModel):
    name: str = ""
    description: str = ""
    parent_id: Optional[str] = None
    image_url: str = ""


class Category(CategoryBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ReviewCreate(BaseModel):
    product_id: str = ""
    user_id: int = 0
    rating: int = 0
    comment: str = ""


class Review(ReviewCreate):
    id: str
    helpful: int = 0
    created_at: Optional[datetime] = None


class WishlistItemCreate(BaseModel):
    product_id: str = ""


class WishlistItem(BaseModel):
    id: str
    user_id: int
    product_id: str
    added_at: Optional[datetime] = None
