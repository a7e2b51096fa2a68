"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or the public API surface
- Request execution depends on the transport port, not on a transport implementation
- Adapters can depend on domain
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import anything but other domain models."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("mvg_api.domain.models*")
        .should_not_import("mvg_api.adapters*")
        .should_not_import("mvg_api.api")
        .should_not_import("mvg_api.cli")
        .should_not_import("mvg_api.domain.ports*")
        .should_not_import("mvg_api.domain.exceptions")
        .may_import("mvg_api.domain.models*")
        .check("mvg_api", only_direct_imports=True)
    )


def test_domain_does_not_import_outer_layers() -> None:
    """Domain layer should not import adapters, the public API or the CLI."""
    (
        archrule("domain independence", comment="Domain layer should not depend on outer layers")
        .match("mvg_api.domain*")
        .should_not_import("mvg_api.adapters*")
        .should_not_import("mvg_api.api")
        .should_not_import("mvg_api.cli")
        .may_import("mvg_api.domain*")
        .check("mvg_api", only_direct_imports=True)
    )


def test_client_does_not_import_transport_implementations() -> None:
    """Request execution should only know the transport port."""
    (
        archrule("client transport independence", comment="Client must not import aiohttp adapter")
        .match("mvg_api.adapters.mvg_api*")
        .should_not_import("mvg_api.adapters.http*")
        .should_not_import("mvg_api.adapters.config*")
        .may_import("mvg_api.domain*")
        .may_import("mvg_api.adapters.mvg_api*")
        .check("mvg_api", only_direct_imports=True)
    )


def test_adapters_dont_import_public_api() -> None:
    """Adapters should not import the public API surface or the CLI (to avoid cycles)."""
    (
        archrule("adapters independence", comment="Adapters should not depend on mvg_api.api")
        .match("mvg_api.adapters*")
        .should_not_import("mvg_api.api")
        .should_not_import("mvg_api.cli")
        .may_import("mvg_api.domain*")
        .may_import("mvg_api.adapters*")
        .check("mvg_api", only_direct_imports=True)
    )
