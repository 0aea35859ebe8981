"""SQLAlchemy models for product catalog.

Defines Product, Category and Brand tables for persistent storage.
"""

from sqlalchemy import JSON, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from products_api.infrastructure.database import Base


class Category(Base):
    """Product category (e.g., "smartphones", "laptops")."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"


class Brand(Base):
    """Product brand (e.g., "Apple", "Samsung")."""

    __tablename__ = "brands"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Brand(id={self.id}, name={self.name})>"


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier.
        title: Product title.
        description: Product description.
        price: Price in whole currency units.
        discount_percentage: Current discount (0-100).
        rating: Average rating (0.0-5.0).
        stock: Available quantity.
        thumbnail: Thumbnail image URL.
        images: List of image URLs.
        category_id: Owning category.
        brand_id: Owning brand.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    discount_percentage: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    thumbnail: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )
    brand_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("brands.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    category: Mapped["Category"] = relationship("Category", lazy="selectin")
    brand: Mapped["Brand"] = relationship("Brand", lazy="selectin")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, title={self.title[:30]}...)>"
