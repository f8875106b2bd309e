"""
Catalog store tests: filtering, CRUD semantics and copy isolation.
"""
import pytest

from lumina.data.seed_products import seed_products
from lumina.errors import InvalidArgument
from lumina.models.product import Category, Product
from lumina.stores.catalog_store import CatalogStore


def _catalog() -> CatalogStore:
    return CatalogStore(seed_products())


def _product(product_id: int, **overrides) -> Product:
    data = {
        "id": product_id,
        "name": f"테스트 상품 {product_id}",
        "price": 10000,
        "category": Category.HOME,
        "tags": [],
    }
    data.update(overrides)
    return Product(**data)


def test_seed_catalog_has_eight_products_in_order():
    catalog = _catalog()
    assert len(catalog) == 8
    assert [p.id for p in catalog.products()] == [1, 2, 3, 4, 5, 6, 7, 8]


def test_duplicate_seed_ids_are_rejected():
    with pytest.raises(InvalidArgument):
        CatalogStore([_product(1), _product(1)])


def test_filter_all_with_empty_query_returns_everything():
    catalog = _catalog()
    assert [p.id for p in catalog.filter()] == [p.id for p in catalog.products()]


def test_filter_by_category_keeps_catalog_order():
    results = _catalog().filter(Category.CLOTHING)
    assert [p.id for p in results] == [1, 5]
    assert all(p.category is Category.CLOTHING for p in results)


def test_filter_accepts_category_value_strings():
    assert [p.id for p in _catalog().filter("전자제품")] == [2, 6]


def test_filter_matches_name_case_insensitively():
    catalog = _catalog()
    assert [p.id for p in catalog.filter(query="pro")] == [2]
    assert [p.id for p in catalog.filter(query="PRO")] == [2]


def test_filter_matches_tags():
    # "인테리어" appears only in tags
    assert [p.id for p in _catalog().filter(query="인테리어")] == [4, 8]


def test_filter_matches_tags_case_insensitively():
    catalog = CatalogStore([_product(1, name="Lamp", tags=["Denim"])])
    assert [p.id for p in catalog.filter(query="denim")] == [1]


def test_filter_combines_category_and_query():
    catalog = _catalog()
    assert [p.id for p in catalog.filter(Category.HOME, "인테리어")] == [4, 8]
    assert catalog.filter(Category.CLOTHING, "인테리어") == []


def test_add_prepends_new_product():
    catalog = _catalog()
    catalog.add(_product(100))
    products = catalog.products()
    assert products[0].id == 100
    assert len(products) == 9


def test_add_rejects_existing_id():
    catalog = _catalog()
    with pytest.raises(InvalidArgument):
        catalog.add(_product(3))
    assert len(catalog) == 8


def test_update_replaces_in_place():
    catalog = _catalog()
    catalog.update(_product(4, name="바뀐 화병", price=1000))
    products = catalog.products()
    assert products[3].id == 4
    assert products[3].name == "바뀐 화병"
    assert products[3].price == 1000


def test_update_absent_id_is_a_no_op():
    catalog = _catalog()
    assert catalog.update(_product(999)) is None
    assert not catalog.exists(999)
    assert len(catalog) == 8


def test_remove_then_filter_excludes_product():
    catalog = _catalog()
    assert catalog.remove(5) is True
    assert all(p.id != 5 for p in catalog.filter(Category.ALL, ""))
    assert all(p.id != 5 for p in catalog.filter(Category.CLOTHING, "데님"))


def test_remove_absent_id_is_a_no_op():
    catalog = _catalog()
    assert catalog.remove(999) is False
    assert len(catalog) == 8


def test_reads_return_copies():
    catalog = _catalog()
    product = catalog.get(1)
    product.name = "밖에서 바꾼 이름"
    product.tags.append("변조")
    stored = catalog.get(1)
    assert stored.name == "베이직 오버핏 코튼 셔츠"
    assert "변조" not in stored.tags


def test_categories_start_with_all_sentinel():
    categories = _catalog().categories()
    assert categories[0] is Category.ALL
    assert Category.ALL not in categories[1:]
    assert set(categories[1:]) == set(Category.concrete())


def test_product_cannot_use_all_sentinel_as_category():
    with pytest.raises(ValueError):
        _product(1, category=Category.ALL)


def test_product_price_cannot_be_negative():
    with pytest.raises(ValueError):
        _product(1, price=-1)
