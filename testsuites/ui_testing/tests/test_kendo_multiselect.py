"""
================================================================================
KendoUI MultiSelect UI Tests
================================================================================

Drives the public MultiSelect demo through page objects and the fluent
verification chain.

================================================================================
"""

import allure
import pytest
from selenium.webdriver.common.by import By

from fluentverify.framework.exceptions import VerificationError
from fluentverify.kendo import KendoMultiSelectDemoPage


@allure.epic("UI Testing")
@allure.feature("Kendo MultiSelect")
class TestKendoMultiSelect:
    """MultiSelect demo test suite."""

    @allure.title("Movies widget is rendered")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.kendo
    def test_movies_widget_rendered(self, multiselect_page: KendoMultiSelectDemoPage):
        multiselect_page.verify_presence_of("movies select", (By.ID, "movies"))
        multiselect_page.movies.verify_classes("k-multiselect")

    @allure.title("Selecting a movie marks its option as selected")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.kendo
    def test_select_movie(self, multiselect_page: KendoMultiSelectDemoPage):
        page = multiselect_page.movies.select("Taxi Driver")

        page.movies.option("Taxi Driver").verify_selected(True).verify_text("Taxi Driver")
        page.verify(
            lambda p: "Taxi Driver" in p.movies.selected_texts,
            "that Taxi Driver is listed as selected.",
        )

    @allure.title("Selected options can be captured mid-chain")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.kendo
    def test_store_selected_texts(self, multiselect_page: KendoMultiSelectDemoPage):
        page, before = multiselect_page.store(lambda p: p.movies.selected_texts)
        page.movies.select("Rocky")

        _, after = page.store(lambda p: p.movies.selected_texts)
        assert set(after) - set(before) == {"Rocky"}

    @allure.title("Unknown option is reported as a verification failure")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P2
    @pytest.mark.kendo
    def test_unknown_option(self, multiselect_page: KendoMultiSelectDemoPage):
        with pytest.raises(VerificationError):
            multiselect_page.movies.select("Not A Movie")
