"""Tests for screen parsing, AppState navigation, alerts and confirmations."""

import pytest

from catalogue.shared.domain.models import Product
from catalogue.showroom.state import (
    AddProduct,
    AppSettings,
    AppState,
    Dashboard,
    EditProduct,
    ProductDetail,
    ProductList,
    Search,
    Settings,
    SettingsProducts,
    parse_screen,
)

TOWEL = Product(id=2, name="Bath Towel", category="Towels")


class TestParseScreen:

    @pytest.mark.parametrize("category", ["Towels", "Eco-Friendly", "S-Collection"])
    def test_product_list_keeps_dashed_categories(self, category):
        assert parse_screen(f"ProductList-{category}") == ProductList(category)

    def test_unknown_id_falls_back_to_dashboard(self):
        assert parse_screen("Nowhere") == Dashboard()
        assert parse_screen("ProductList-") == Dashboard()

    def test_screens_requiring_context_fall_back_without_it(self):
        assert parse_screen("ProductDetail") == Dashboard()
        assert parse_screen("EditProduct") == Dashboard()
        assert parse_screen("ProductList") == Dashboard()

    def test_context_is_attached(self):
        assert parse_screen("ProductDetail", product=TOWEL) == ProductDetail(TOWEL)
        assert parse_screen("AddProduct", category="Lobby") == AddProduct(initial_category="Lobby")
        assert parse_screen("Search", search_term="sheet") == Search(term="sheet")


class TestAppState:

    def test_login_and_logout(self):
        state = AppState()
        assert not state.login("Admin", "wrong")
        assert state.login_error == "Invalid username or password"

        assert state.login("Admin", "MarketingComfort25")
        assert state.authenticated
        assert state.login_error == ""

        state.navigate(Settings())
        state.logout()
        assert not state.authenticated
        assert state.screen == Dashboard()

    def test_navigate_closes_previous_scope(self):
        state = AppState()
        first_scope = state.screen_scope

        state.navigate("ProductList-Eco-Friendly")

        assert first_scope.closed
        assert state.screen_scope.active
        assert state.screen == ProductList("Eco-Friendly")

    def test_navigating_to_an_equal_screen_still_gets_a_fresh_scope(self):
        state = AppState()
        state.navigate(ProductList("Towels"))
        scope = state.screen_scope

        state.navigate(ProductList("Towels"))

        assert scope.closed
        assert state.screen_scope is not scope

    def test_navigation_replaces_context(self):
        state = AppState()
        state.navigate(ProductDetail(TOWEL))
        assert state.selected_product == TOWEL

        state.navigate(Dashboard())
        assert state.selected_product is None

    @pytest.mark.parametrize(
        "screen, expected",
        [
            (ProductDetail(TOWEL), ProductList("Towels")),
            (ProductDetail(Product(id=9, name="Loose")), Dashboard()),
            (EditProduct(TOWEL), ProductDetail(TOWEL)),
            (AppSettings(), Settings()),
            (SettingsProducts(), Settings()),
            (Settings(), Dashboard()),
            (Search("towel"), Dashboard()),
            (ProductList("Towels"), Dashboard()),
        ],
    )
    def test_back_targets(self, screen, expected):
        state = AppState()
        state.navigate(screen)
        assert state.back_target() == expected

    def test_blank_search_does_not_navigate(self):
        state = AppState()
        assert not state.submit_search("   ")
        assert state.screen == Dashboard()

        assert state.submit_search("  towel ")
        assert state.screen == Search("towel")
        assert state.search_term == "towel"

    def test_change_listeners_fire_on_navigation(self):
        state = AppState()
        seen = []
        state.on_change(seen.append)

        state.navigate(Settings())
        state.go_back()

        assert seen == [Settings(), Dashboard()]


class TestDialogs:

    def test_success_alert_navigates_on_dismiss(self):
        state = AppState()
        state.navigate(AddProduct())
        state.show_alert("Product added successfully!", "success", then=Dashboard())

        state.dismiss_alert()

        assert state.alert is None
        assert state.screen == Dashboard()

    def test_error_alert_stays_on_screen(self):
        state = AppState()
        state.navigate(AddProduct())
        state.show_alert("Failed", "error", then=Dashboard())

        state.dismiss_alert()

        assert state.screen == AddProduct()

    @pytest.mark.asyncio
    async def test_cancelled_confirmation_never_runs_action(self):
        state = AppState()
        calls = []
        state.request_confirmation("Sure?", lambda: calls.append("ran"))

        state.cancel_confirmation()
        await state.confirm()

        assert calls == []
        assert state.pending_confirmation is None

    @pytest.mark.asyncio
    async def test_confirm_awaits_async_actions(self):
        state = AppState()
        calls = []

        async def action():
            calls.append("ran")

        state.request_confirmation("Sure?", action, danger=True)
        assert state.pending_confirmation.danger

        await state.confirm()

        assert calls == ["ran"]
        assert state.pending_confirmation is None
