import pytest

from ecwid_sdk.api_client import (
    Attribute,
    Attributes,
    Category,
    NewProduct,
    Product,
    SearchResponse,
)
from ecwid_sdk.api_client.schema import ProductImage


class TestIdentifiers:
    @pytest.mark.unit
    def test_negative_id_reads_as_zero(self):
        assert Category.model_validate({"id": -5, "parentId": -1}).id == 0

    @pytest.mark.unit
    def test_positive_id_kept(self):
        assert Category.model_validate({"id": 12}).id == 12


class TestWireNames:
    @pytest.mark.unit
    def test_payload_uses_camel_case_and_set_fields_only(self):
        product = NewProduct(name="Mug", compare_to_price=12.5, is_shipping_required=True)

        assert product.to_payload() == {
            "name": "Mug",
            "compareToPrice": 12.5,
            "isShippingRequired": True,
        }

    @pytest.mark.unit
    def test_image_size_aliases(self):
        image = ProductImage.model_validate(
            {"id": 1, "image160pxUrl": "small", "image1500pxUrl": "large"}
        )

        assert image.image_160px_url == "small"
        assert image.image_1500px_url == "large"
        assert image.to_payload() == {
            "id": 1,
            "image160pxUrl": "small",
            "image1500pxUrl": "large",
        }

    @pytest.mark.unit
    def test_unknown_fields_are_kept(self):
        product = Product.model_validate({"id": 3, "brandNewField": {"a": 1}})

        assert product.model_extra == {"brandNewField": {"a": 1}}


@pytest.mark.unit
def test_search_response_of_products():
    page = SearchResponse[Product].model_validate({
        "total": 1,
        "count": 1,
        "offset": 0,
        "limit": 100,
        "items": [{
            "id": 7,
            "name": "Mug",
            "combinations": [{"id": 70, "sku": "MUG-1", "options": [{"name": "Color", "value": "Red"}]}],
            "media": {"images": [{"id": 2, "isMain": True, "image400pxUrl": "m"}]},
        }],
    })

    product = page.items[0]
    assert isinstance(product, Product)
    assert product.combinations[0].sku == "MUG-1"
    assert product.media.images[0].is_main is True
    assert product.media.images[0].image_400px_url == "m"


class TestAttributes:
    @pytest.fixture
    def attributes(self):
        return Attributes.model_validate([
            {"id": 1, "name": "Brand", "value": "Acme"},
            {"id": 2, "name": "UPC", "value": "0123"},
        ])

    @pytest.mark.unit
    def test_lookup(self, attributes):
        assert attributes.get_by_name("UPC").id == 2
        assert attributes.get_by_id(1).value == "Acme"
        assert attributes.get_by_name("Missing") is None
        assert attributes.get_by_id(99) is None
        assert len(attributes) == 2
        assert [a.name for a in attributes] == ["Brand", "UPC"]

    @pytest.mark.unit
    def test_serialised_as_array(self, attributes):
        assert attributes.model_dump(by_alias=True, exclude_unset=True) == [
            {"id": 1, "name": "Brand", "value": "Acme"},
            {"id": 2, "name": "UPC", "value": "0123"},
        ]

    @pytest.mark.unit
    def test_append_stores_a_copy(self, attributes):
        source = Attribute(name="Color", value="Red")

        stored = attributes.append(source)
        source.value = "Blue"

        assert stored is not source
        assert attributes.get_by_name("Color").value == "Red"

    @pytest.mark.unit
    def test_append_empty(self):
        attributes = Attributes()

        stored = attributes.append()
        stored.name = "Size"

        assert attributes.get_by_name("Size") is stored

    @pytest.mark.unit
    def test_delete_by_identity(self, attributes):
        lookalike = Attribute(id=1, name="Brand", value="Acme")

        assert attributes.delete(lookalike) is False
        assert attributes.delete(None) is False
        assert attributes.delete(attributes.get_by_id(1)) is True
        assert [a.id for a in attributes] == [2]

    @pytest.mark.unit
    def test_clone_is_independent(self, attributes):
        clone = attributes.clone()
        clone.get_by_id(1).value = "Other"

        assert attributes.get_by_id(1).value == "Acme"

    @pytest.mark.unit
    def test_equality_ignores_order(self, attributes):
        reversed_attributes = Attributes.model_validate([
            {"id": 2, "name": "UPC", "value": "0123"},
            {"id": 1, "name": "Brand", "value": "Acme"},
        ])

        assert attributes.is_equal_to(reversed_attributes)
        assert attributes.is_equal_to(attributes.clone())

    @pytest.mark.unit
    def test_equality_detects_differences(self, attributes):
        changed = attributes.clone()
        changed.get_by_id(2).value = "9999"

        assert not attributes.is_equal_to(changed)
        assert not attributes.is_equal_to(Attributes())
