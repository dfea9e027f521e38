from farmstand.models.product import Category
from farmstand.schemas.product import ProductFields
from farmstand.services.validation import validate_product, validate_product_update


def test_valid_form_values_are_coerced():
    result = validate_product({"name": " Apple ", "price": "1.5", "category": "fruit", "quantity": "10"})
    assert result.ok
    assert result.errors == ()
    assert result.value == ProductFields(name="Apple", price=1.5, category=Category.fruit, quantity=10)


def test_blank_values_count_as_missing():
    result = validate_product({"name": "", "price": "2", "category": "dairy", "quantity": " "})
    assert not result.ok
    assert result.value is None
    assert [e.field for e in result.errors] == ["name"]
    assert result.errors[0].message == "Field required"


def test_quantity_defaults_to_zero():
    result = validate_product({"name": "Kale", "price": "3", "category": "vegetable"})
    assert result.ok
    assert result.value.quantity == 0


def test_category_is_case_insensitive():
    result = validate_product({"name": "Enoki", "price": "4", "category": "MUSHROOMS"})
    assert result.ok
    assert result.value.category is Category.mushrooms


def test_every_violation_is_reported():
    result = validate_product({"price": "-1", "category": "meat", "quantity": "1.5"})
    assert not result.ok
    assert {e.field for e in result.errors} == {"name", "price", "category", "quantity"}


def test_non_finite_price_is_rejected():
    result = validate_product({"name": "Apple", "price": "inf", "category": "fruit"})
    assert not result.ok
    assert [e.field for e in result.errors] == ["price"]


def test_update_merges_over_current_fields():
    current = {"name": "Apple", "price": 1.5, "category": "fruit", "quantity": 10}

    result = validate_product_update(current, {"price": "1.75", "name": ""})

    assert result.ok
    assert result.value.name == "Apple"
    assert result.value.price == 1.75
    assert result.value.quantity == 10


def test_update_revalidates_merged_document():
    current = {"name": "Apple", "price": 1.5, "category": "fruit", "quantity": 0}

    result = validate_product_update(current, {"category": "meat"})

    assert not result.ok
    assert [e.field for e in result.errors] == ["category"]


def test_quantity_is_bounded_by_the_store_column():
    assert validate_product({"name": "Rice", "price": "1", "category": "fruit", "quantity": "2147483647"}).ok

    result = validate_product({"name": "Rice", "price": "1", "category": "fruit", "quantity": "2147483648"})
    assert not result.ok
    assert [e.field for e in result.errors] == ["quantity"]
