"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters can depend on domain
- The CLI is the only place where everything meets
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should import only each other and the domain errors."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("ticket_machine.domain.models*")
        .should_not_import("ticket_machine.adapters*")
        .should_not_import("ticket_machine.application*")
        .should_not_import("ticket_machine.domain.contracts*")
        .should_not_import("ticket_machine.domain.ports*")
        .may_import("ticket_machine.domain.models*")
        .may_import("ticket_machine.domain.errors")
        .check("ticket_machine")
    )


def test_domain_errors_have_no_dependencies() -> None:
    """Domain errors sit at the bottom of the import graph."""
    (
        archrule("domain errors", comment="Domain errors should not import the rest of the package")
        .match("ticket_machine.domain.errors")
        .should_not_import("ticket_machine.domain.models*")
        .should_not_import("ticket_machine.application*")
        .should_not_import("ticket_machine.adapters*")
        .check("ticket_machine")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols/interfaces) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("ticket_machine.domain.contracts*")
        .should_not_import("ticket_machine.adapters*")
        .should_not_import("ticket_machine.application*")
        .may_import("ticket_machine.domain.contracts*")
        .may_import("ticket_machine.domain.models*")
        .check("ticket_machine")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("ticket_machine.domain.ports*")
        .should_not_import("ticket_machine.adapters*")
        .should_not_import("ticket_machine.application*")
        .may_import("ticket_machine.domain.ports*")
        .may_import("ticket_machine.domain.models*")
        .check("ticket_machine")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("ticket_machine.application*")
        .should_not_import("ticket_machine.adapters*")
        .should_not_import("ticket_machine.cli")
        .may_import("ticket_machine.domain*")
        .may_import("ticket_machine.application*")
        .check("ticket_machine")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("ticket_machine.adapters*")
        .should_not_import("ticket_machine.application*")
        .may_import("ticket_machine.domain*")
        .may_import("ticket_machine.adapters*")
        .check("ticket_machine", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("ticket_machine.domain*")
        .should_not_import("ticket_machine.adapters*")
        .should_not_import("ticket_machine.application*")
        .should_not_import("ticket_machine.cli")
        .may_import("ticket_machine.domain*")
        .check("ticket_machine", only_direct_imports=True)
    )
