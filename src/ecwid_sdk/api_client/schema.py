from __future__ import annotations

from typing import Annotated, Any, Dict, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel


T = TypeVar("T")


def _negative_as_zero(v: Any) -> Any:
    # The API uses negative ids as "no entity"
    if isinstance(v, int) and not isinstance(v, bool) and v < 0:
        return 0
    return v


ID = Annotated[int, BeforeValidator(_negative_as_zero)]


class EcwidModel(BaseModel):
    """
    Base for all API shapes.

    - Python attributes are snake_case, wire names are camelCase
    - Unknown fields are kept, so nothing the API returns is lost
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with wire names, limited to the fields that were set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


# ------------------------------
# Envelopes
# ------------------------------


class ErrorResponse(EcwidModel):
    error_message: str = ""


class CreateResult(EcwidModel):
    id: int = Field(0, ge=0)


class UpdateResult(EcwidModel):
    update_count: int = 0


class DeleteResult(EcwidModel):
    delete_count: int = Field(0, ge=0)


class SearchResponse(EcwidModel, Generic[T]):
    """Common page envelope of every search endpoint."""

    total: int = Field(0, ge=0)
    count: int = Field(0, ge=0)
    offset: int = Field(0, ge=0)
    limit: int = Field(0, ge=0)
    items: List[T] = Field(default_factory=list)


# ------------------------------
# Attributes
# ------------------------------


class Attribute(EcwidModel):
    """
    Attribute value of a product or product type.

    Which fields are meaningful depends on the call: updates refer to
    ``id`` or ``alias``, reads return ``name``/``type``/``show``.
    """

    id: Optional[ID] = None
    alias: Optional[str] = None  # system attributes like UPC or BRAND
    name: Optional[str] = None
    value: Optional[str] = None
    type: Optional[str] = None  # CUSTOM, UPC, BRAND, GENDER, AGE_GROUP, COLOR, SIZE, ...
    show: Optional[str] = None  # NOTSHOW, DESCR, PRICE


class Attributes(RootModel[List[Attribute]]):
    """List of attributes, serialised as a JSON array."""

    root: List[Attribute] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Attribute]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get_by_name(self, name: str) -> Optional[Attribute]:
        """First attribute with this name, or None."""
        for attribute in self.root:
            if attribute.name == name:
                return attribute
        return None

    def get_by_id(self, attribute_id: int) -> Optional[Attribute]:
        for attribute in self.root:
            if attribute.id == attribute_id:
                return attribute
        return None

    def append(self, attribute: Optional[Attribute] = None) -> Attribute:
        """Append a copy of ``attribute`` (or an empty one) and return the stored instance."""
        stored = attribute.model_copy() if attribute is not None else Attribute()
        self.root.append(stored)
        return stored

    def delete(self, attribute: Optional[Attribute]) -> bool:
        """Remove this exact instance. Returns True if it was found."""
        if attribute is None:
            return False
        for i, candidate in enumerate(self.root):
            if candidate is attribute:
                del self.root[i]
                return True
        return False

    def clone(self) -> "Attributes":
        return Attributes([a.model_copy() for a in self.root])

    def is_equal_to(self, other: "Attributes") -> bool:
        """Compare the attribute values regardless of their order."""
        if len(self.root) != len(other.root):
            return False

        visited = [False] * len(other.root)
        for attribute in self.root:
            for j, candidate in enumerate(other.root):
                if not visited[j] and attribute == candidate:
                    visited[j] = True
                    break
            else:
                return False
        return True


# ------------------------------
# Products
# ------------------------------


class ProductImage(EcwidModel):
    id: ID = 0
    order_by: int = 0
    is_main: bool = False
    image_160px_url: Optional[str] = Field(None, alias="image160pxUrl")
    image_400px_url: Optional[str] = Field(None, alias="image400pxUrl")
    image_800px_url: Optional[str] = Field(None, alias="image800pxUrl")
    image_1500px_url: Optional[str] = Field(None, alias="image1500pxUrl")
    image_original_url: Optional[str] = None


class ProductMedia(EcwidModel):
    images: List[ProductImage] = Field(default_factory=list)


class ProductDimensions(EcwidModel):
    length: float = 0
    width: float = 0
    height: float = 0


class WholesalePrice(EcwidModel):
    quantity: int = 0
    price: Optional[float] = None


class ProductOptionChoice(EcwidModel):
    text: Optional[str] = None
    price_modifier: float = 0
    price_modifier_type: Optional[str] = None  # PERCENT or ABSOLUTE


class ProductOption(EcwidModel):
    type: Optional[str] = None  # SELECT, RADIO, CHECKBOX, TEXTFIELD, TEXTAREA, DATE, FILES
    name: Optional[str] = None
    required: bool = False
    choices: List[ProductOptionChoice] = Field(default_factory=list)
    default_choice: int = 0


class OptionValue(EcwidModel):
    name: Optional[str] = None
    value: Optional[str] = None


class ShippingSettings(EcwidModel):
    type: Optional[str] = None  # GLOBAL_METHODS, SELECTED_METHODS, FLAT_RATE, FREE_SHIPPING
    method_markup: Optional[float] = None
    flat_rate: Optional[float] = None
    disabled_methods: List[str] = Field(default_factory=list)
    enabled_methods: List[str] = Field(default_factory=list)


class TaxInfo(EcwidModel):
    default_location_included_tax_rate: float = 0
    enabled_manual_taxes: List[int] = Field(default_factory=list)


class RelatedCategory(EcwidModel):
    enabled: bool = False
    category_id: ID = 0
    product_count: int = 0


class RelatedProducts(EcwidModel):
    product_ids: List[int] = Field(default_factory=list)
    related_category: Optional[RelatedCategory] = None


class CategoriesInfo(EcwidModel):
    id: ID = 0
    enabled: bool = False


class NewProduct(EcwidModel):
    """Writable part of a product, used by product_add / product_update."""

    name: Optional[str] = None  # mandatory for product_add
    sku: Optional[str] = None
    quantity: Optional[int] = None
    unlimited: Optional[bool] = None
    price: Optional[float] = None
    compare_to_price: Optional[float] = None
    is_shipping_required: Optional[bool] = None
    weight: Optional[float] = None
    product_class_id: Optional[ID] = None
    enabled: Optional[bool] = None
    warning_limit: Optional[int] = None
    fixed_shipping_rate_only: Optional[bool] = None
    fixed_shipping_rate: Optional[float] = None
    description: Optional[str] = None
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    default_category_id: Optional[ID] = None
    show_on_frontpage: Optional[int] = None
    category_ids: Optional[List[int]] = None
    wholesale_prices: Optional[List[WholesalePrice]] = None
    options: Optional[List[ProductOption]] = None
    attributes: Optional[Attributes] = None
    tax: Optional[TaxInfo] = None
    shipping: Optional[ShippingSettings] = None
    related_products: Optional[RelatedProducts] = None
    dimensions: Optional[ProductDimensions] = None
    media: Optional[ProductMedia] = None


class Product(NewProduct):
    id: ID = 0
    in_stock: bool = False
    default_displayed_price: float = 0
    default_displayed_price_formatted: Optional[str] = None
    url: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    create_timestamp: int = 0
    update_timestamp: int = 0
    default_combination_id: ID = 0
    is_sample_product: bool = False
    combinations: List["ProductVariation"] = Field(default_factory=list)
    categories: List[CategoriesInfo] = Field(default_factory=list)


# ------------------------------
# Product variations
# ------------------------------


class NewProductVariation(EcwidModel):
    sku: Optional[str] = None
    quantity: Optional[int] = None
    unlimited: Optional[bool] = None
    price: Optional[float] = None
    weight: Optional[float] = None
    warning_limit: Optional[int] = None
    compare_to_price: Optional[float] = None
    is_shipping_required: Optional[bool] = None
    options: Optional[List[OptionValue]] = None
    wholesale_prices: Optional[List[WholesalePrice]] = None
    attributes: Optional[Attributes] = None


class ProductVariation(NewProductVariation):
    id: ID = 0
    combination_number: int = 0
    thumbnail_url: Optional[str] = None
    image_url: Optional[str] = None
    small_thumbnail_url: Optional[str] = None
    hd_thumbnail_url: Optional[str] = None
    original_image_url: Optional[str] = None


Product.model_rebuild()


# ------------------------------
# Product types
# ------------------------------


class ProductType(EcwidModel):
    """Product type (product class): a group of products sharing the same attributes."""

    id: Optional[ID] = None  # mandatory for update
    name: Optional[str] = None
    attributes: Optional[Attributes] = None


# ------------------------------
# Categories
# ------------------------------


class ImageDetails(EcwidModel):
    url: Optional[str] = None
    width: int = 0
    height: int = 0


class NewCategory(EcwidModel):
    name: Optional[str] = None
    parent_id: Optional[ID] = None
    order_by: Optional[int] = None
    description: Optional[str] = None
    enabled: Optional[bool] = None
    product_ids: Optional[List[int]] = None


class Category(NewCategory):
    id: ID = 0
    hd_thumbnail_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    image_url: Optional[str] = None
    original_image_url: Optional[str] = None
    url: Optional[str] = None
    product_count: int = 0
    enabled_product_count: int = 0
    original_image: Optional[ImageDetails] = None


# ------------------------------
# Orders
# ------------------------------


class PersonInfo(EcwidModel):
    name: Optional[str] = None
    company_name: Optional[str] = None
    street: Optional[str] = None  # lines separated by '\n'
    city: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    postal_code: Optional[str] = None
    state_or_province_code: Optional[str] = None
    state_or_province_name: Optional[str] = None
    phone: Optional[str] = None


class ShippingOptionInfo(EcwidModel):
    shipping_carrier_name: Optional[str] = None
    shipping_method_name: Optional[str] = None
    shipping_rate: Optional[float] = None
    estimated_transit_time: Optional[str] = None
    is_pickup: Optional[bool] = None
    pickup_instruction: Optional[str] = None


class DiscountCouponInfo(EcwidModel):
    name: Optional[str] = None
    code: Optional[str] = None
    discount_type: Optional[str] = None  # ABS, PERCENT, SHIPPING, ...
    status: Optional[str] = None
    discount: Optional[float] = None


class OrderItemOption(EcwidModel):
    name: Optional[str] = None
    type: Optional[str] = None
    value: Optional[str] = None


class OrderItem(EcwidModel):
    name: Optional[str] = None
    quantity: int = 0
    product_id: ID = 0
    category_id: ID = 0
    price: float = 0
    product_price: float = 0
    weight: float = 0
    sku: Optional[str] = None
    short_description: Optional[str] = None
    tax: float = 0
    shipping: float = 0
    quantity_in_stock: int = 0
    is_shipping_required: bool = False
    digital: bool = False
    coupon_applied: bool = False
    selected_options: List[OrderItemOption] = Field(default_factory=list)
    dimensions: Optional[ProductDimensions] = None


class NewOrder(EcwidModel):
    subtotal: Optional[float] = None
    total: Optional[float] = None
    email: Optional[str] = None
    payment_method: Optional[str] = None
    payment_module: Optional[str] = None
    tax: Optional[float] = None
    ip_address: Optional[str] = None
    coupon_discount: Optional[float] = None
    payment_status: Optional[str] = None  # AWAITING_PAYMENT, PAID, CANCELLED, REFUNDED, ...
    fulfillment_status: Optional[str] = None  # AWAITING_PROCESSING, PROCESSING, SHIPPED, ...
    referer_url: Optional[str] = None
    order_comments: Optional[str] = None
    customer_id: Optional[ID] = None
    hidden: Optional[bool] = None
    discount: Optional[float] = None
    create_date: Optional[str] = None  # e.g. "2015-09-20 19:59:43 +0000"
    customer_group: Optional[str] = None
    discount_coupon: Optional[DiscountCouponInfo] = None
    items: Optional[List[OrderItem]] = None
    billing_person: Optional[PersonInfo] = None
    shipping_person: Optional[PersonInfo] = None
    shipping_option: Optional[ShippingOptionInfo] = None
    additional_info: Optional[Dict[str, str]] = None
    tracking_number: Optional[str] = None
    private_admin_notes: Optional[str] = None
    external_order_id: Optional[str] = None


class Order(NewOrder):
    order_id: ID = Field(0, alias="orderNumber")
    vendor_order_number: Optional[str] = None
    usd_total: float = 0
    update_date: Optional[str] = None
    create_timestamp: int = 0
    update_timestamp: int = 0
    customer_group_id: ID = 0
    refunded_amount: float = 0


# ------------------------------
# Store profile
# ------------------------------


class InstantSiteInfo(EcwidModel):
    ecwid_subdomain: Optional[str] = None
    custom_domain: Optional[str] = None
    generated_url: Optional[str] = None
    store_logo_url: Optional[str] = None


class GeneralInfo(EcwidModel):
    store_id: int = 0
    store_url: Optional[str] = None
    starter_site: Optional[InstantSiteInfo] = None


class Account(EcwidModel):
    account_name: Optional[str] = None
    account_nick_name: Optional[str] = None
    account_email: Optional[str] = None
    available_features: List[str] = Field(default_factory=list)
    white_label: bool = False


class StoreProfile(EcwidModel):
    general_info: Optional[GeneralInfo] = None
    account: Optional[Account] = None


def as_payload(body: Any) -> Any:
    """Request body for a model or a plain mapping."""
    if isinstance(body, EcwidModel):
        return body.to_payload()
    return dict(body)
