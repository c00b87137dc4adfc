"""Tests for the catalog accessor, product model and mutation flows."""

import pytest

from catalogue.shared.core.errors import RemoteCallError, ValidationError
from catalogue.shared.domain.catalog import (
    CatalogAccessor,
    ProductForm,
    ProductMutations,
    filter_by_category,
    parse_image_urls,
    search_products,
)
from catalogue.shared.domain.catalog.mutations import INVALID_PRICE_MESSAGE, MISSING_FIELDS_MESSAGE
from catalogue.shared.domain.models import Category, Product


def make_products():
    return [
        Product(id=1, name="Cotton Sheet", description="Soft percale", category="Bedding"),
        Product(id=2, name="Bath Towel", description="Thick COTTON loops", category="Towels"),
        Product(id=3, name="", description="cotton swabs", category="Bathroom Amenities"),
        Product(id=4, name="Key Card Holder", description="", category="Leather Accessories"),
    ]


class TestQueries:

    def test_category_filter_is_exact(self):
        products = make_products()
        assert [p.id for p in filter_by_category(products, "Towels")] == [2]
        assert filter_by_category(products, "towels") == []

    def test_search_matches_name_or_description_case_insensitively(self):
        results = search_products(make_products(), "COTTON")
        assert [p.id for p in results] == [1, 2, 3]

    def test_search_with_no_match(self):
        assert search_products(make_products(), "pillow") == []

    def test_search_tolerates_empty_terms_and_fields(self):
        products = make_products() + [Product(id=5)]
        assert len(search_products(products, "")) == 4
        assert len(search_products(products, None)) == 4

    def test_search_is_case_insensitive_on_the_term(self):
        products = [Product(id=1, name="widget stand")]
        assert search_products(products, "WIDGET") == products

    def test_filter_by_name_ignores_description(self):
        accessor = CatalogAccessor(gateway=None)
        results = accessor.filter_by_name("card", make_products())
        assert [p.id for p in results] == [4]

    @pytest.mark.asyncio
    async def test_fetch_all_caches_products(self, gateway):
        accessor = CatalogAccessor(gateway)

        products = await accessor.fetch_all()

        assert len(products) == 3
        assert [p.id for p in accessor.by_category("Eco-Friendly")] == [3]
        assert [p.id for p in accessor.search("towel")] == [2]


class TestProductModel:

    def test_lenient_price_parsing(self):
        assert Product(price="$1,250.50").price == 1250.5
        assert Product(price="call us").price is None
        assert Product(price=None).price_label == "—"
        assert Product(price=3).price_label == "$3.00"

    def test_scalar_ids_are_kept_as_received(self):
        assert Product(id=1.5).id == 1.5
        assert Product(id=True).id is True
        assert Product(id=4.0).id == 4
        assert Product(id="row-3").id == "row-3"
        assert Product(id=["x"]).id is None

    def test_image_url_must_be_a_list(self):
        assert Product.model_validate({"imageUrl": "https://x.test/a.jpg"}).image_urls == []
        assert Product.model_validate({"imageUrl": [" a ", "", 5]}).image_urls == ["a"]

    def test_gallery_falls_back_to_placeholder(self):
        assert Product().gallery("ph") == ["ph"]
        assert Product(image_urls=["a", "b"]).thumbnail_url("ph") == "a"

    def test_thirteen_categories_in_order(self):
        labels = Category.labels()
        assert len(labels) == 13
        assert labels[0] == "Bedding"
        assert labels[-1] == "S-Collection"


class TestProductForm:

    @pytest.mark.parametrize(
        "price, text",
        [(12345.67, "12345.67"), (1234567, "1234567"), (0.1, "0.1"), (80.0, "80")],
    )
    def test_edit_form_shows_the_exact_price(self, price, text):
        assert ProductForm.from_product(Product(price=price)).price == text

    def test_image_urls_are_split_and_trimmed(self):
        assert parse_image_urls(" a.jpg, ,b.jpg ,") == ["a.jpg", "b.jpg"]
        assert parse_image_urls("") == []

    @pytest.mark.parametrize(
        "form",
        [
            ProductForm(name="", price="10"),
            ProductForm(name="Towel", price="  "),
            ProductForm(name="Towel", price="10", category=""),
        ],
    )
    def test_missing_fields(self, form):
        assert form.validate() == MISSING_FIELDS_MESSAGE

    @pytest.mark.parametrize("price", ["ten", "-1", "nan"])
    def test_invalid_price(self, price):
        assert ProductForm(name="Towel", price=price).validate() == INVALID_PRICE_MESSAGE

    def test_payload_for_edit_keeps_id(self):
        product = Product(id="row-9", name="Robe", price=80, category="Spa Supplies", image_urls=["r.jpg"])
        form = ProductForm.from_product(product)

        payload = form.to_payload()

        assert payload == {
            "id": "row-9",
            "name": "Robe",
            "description": "",
            "price": 80.0,
            "category": "Spa Supplies",
            "imageUrl": ["r.jpg"],
        }

    def test_clear_resets_fields_to_category(self):
        form = ProductForm(name="x", description="y", price="1", image_urls_input="u", category="Lobby")
        form.clear("Towels")
        assert (form.name, form.price, form.image_urls_input, form.category) == ("", "", "", "Towels")


class TestMutations:

    @pytest.mark.asyncio
    async def test_add_sends_product_envelope(self, gateway, endpoint):
        form = ProductForm(name="Pillow", price="25", category="Bedding", image_urls_input="p1.jpg, p2.jpg")

        await ProductMutations(gateway).add(form)

        assert endpoint.posted == [{
            "action": "add",
            "product": {
                "name": "Pillow",
                "description": "",
                "price": 25.0,
                "category": "Bedding",
                "imageUrl": ["p1.jpg", "p2.jpg"],
            },
        }]

    @pytest.mark.asyncio
    async def test_image_urls_are_submitted_as_a_list(self, gateway, endpoint):
        form = ProductForm(
            name="Lamp",
            price="30",
            category="Lobby",
            image_urls_input="http://a.com/1.jpg, http://a.com/2.jpg",
        )

        await ProductMutations(gateway).add(form)

        assert endpoint.posted[0]["product"]["imageUrl"] == ["http://a.com/1.jpg", "http://a.com/2.jpg"]

    @pytest.mark.asyncio
    async def test_invalid_form_never_reaches_the_endpoint(self, gateway, endpoint):
        with pytest.raises(ValidationError):
            await ProductMutations(gateway).add(ProductForm(name="Pillow", price="abc"))
        assert endpoint.requests == []

    @pytest.mark.asyncio
    async def test_update_returns_submitted_product(self, gateway, endpoint):
        form = ProductForm(name="Robe", price="80", category="Spa Supplies", product_id=5)

        updated = await ProductMutations(gateway).update(form)

        assert updated.id == 5
        assert updated.price == 80.0
        assert endpoint.posted[0]["product"]["id"] == 5

    @pytest.mark.asyncio
    async def test_update_without_id_is_rejected(self, gateway, endpoint):
        with pytest.raises(ValidationError):
            await ProductMutations(gateway).update(ProductForm(name="Robe", price="80"))
        assert endpoint.requests == []

    @pytest.mark.asyncio
    async def test_delete_and_clear_all_payloads(self, gateway, endpoint):
        mutations = ProductMutations(gateway)

        await mutations.delete(12)
        await mutations.clear_all()

        assert endpoint.posted == [{"action": "delete", "id": 12}, {"action": "clearAll"}]

    @pytest.mark.asyncio
    async def test_explicit_success_false_raises(self, gateway, endpoint):
        endpoint.actions["delete"] = {"success": False, "message": "Row not found"}

        with pytest.raises(RemoteCallError, match="Row not found"):
            await ProductMutations(gateway).delete(99)
