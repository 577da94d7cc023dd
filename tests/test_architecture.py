"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Application services don't depend on adapters
- Adapters can depend on domain
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("tfl_departures.domain.models*")
        .should_not_import("tfl_departures.adapters*")
        .should_not_import("tfl_departures.application*")
        .should_not_import("tfl_departures.domain.contracts*")
        .should_not_import("tfl_departures.domain.ports*")
        .may_import("tfl_departures.domain.models*")
        .check("tfl_departures")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols/interfaces) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("tfl_departures.domain.contracts*")
        .should_not_import("tfl_departures.adapters*")
        .should_not_import("tfl_departures.application*")
        .may_import("tfl_departures.domain*")
        .check("tfl_departures")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("tfl_departures.domain.ports*")
        .should_not_import("tfl_departures.adapters*")
        .should_not_import("tfl_departures.application*")
        .may_import("tfl_departures.domain*")
        .check("tfl_departures")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("tfl_departures.application*")
        .should_not_import("tfl_departures.adapters*")
        .may_import("tfl_departures.domain*")
        .may_import("tfl_departures.application*")
        .check("tfl_departures")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("tfl_departures.adapters*")
        .should_not_import("tfl_departures.application*")
        .may_import("tfl_departures.domain*")
        .may_import("tfl_departures.adapters*")
        .check("tfl_departures", only_direct_imports=True)
    )


def test_views_dont_import_pyview_app() -> None:
    """Views should not import the main pyview_app module to avoid cycles."""
    (
        archrule("views independence", comment="Views should not import pyview_app")
        .match("tfl_departures.adapters.web.views*")
        .should_not_import("tfl_departures.adapters.web.pyview_app")
        .check("tfl_departures", only_direct_imports=True)
    )


def test_cli_does_not_import_the_web_server() -> None:
    """CLI should not import the web server so it runs without one."""
    (
        archrule("CLI independence", comment="CLI should not depend on the web server")
        .match("tfl_departures.cli")
        .should_not_import("tfl_departures.adapters.web.pyview_app")
        .should_not_import("tfl_departures.adapters.web.views*")
        .check("tfl_departures", only_direct_imports=True)
    )
