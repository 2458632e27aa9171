from recipeBrowser.domain.models import (
    DataState,
    FoodCategory,
    GenericMessageInfo,
    MessageAction,
    UIComponentType,
)


def test_food_category_lookup_by_text():
    assert FoodCategory.from_value("pizza") is FoodCategory.PIZZA
    assert FoodCategory.from_value(" Donut ") is FoodCategory.DONUT
    assert FoodCategory.from_value("sushi") is None
    assert FoodCategory.all_categories()[0] is FoodCategory.CHICKEN
    assert len(FoodCategory.all_categories()) == 9


def test_message_create_assigns_unique_ids():
    a = GenericMessageInfo.create("t", UIComponentType.DIALOG, "d")
    b = GenericMessageInfo.create("t", UIComponentType.DIALOG, "d")
    assert a.id and b.id and a.id != b.id
    assert a.content_key == b.content_key == ("t", "d", UIComponentType.DIALOG)


def test_message_callbacks_do_not_affect_equality():
    a = GenericMessageInfo(
        id="x",
        title="t",
        ui_component_type=UIComponentType.DIALOG,
        positive_action=MessageAction("OK", on_action=lambda: None),
        on_dismiss=lambda: None,
    )
    b = GenericMessageInfo(
        id="x",
        title="t",
        ui_component_type=UIComponentType.DIALOG,
        positive_action=MessageAction("OK"),
    )
    assert a == b


def test_data_state_factories():
    assert DataState.loading().is_loading is True
    data = DataState.data_of([])
    assert data.is_loading is False and data.data == ()
    message = GenericMessageInfo.create("e", UIComponentType.DIALOG)
    error = DataState.error(message)
    assert error.is_loading is False and error.data is None and error.message is message
