"""Architecture tests using pytest-archon.

These tests enforce DDD architectural boundaries between layers
within the Navigation bounded context and the shared kernel.
"""

from pytest_archon import archrule


class TestNavigationDomainLayerBoundaries:
    """Tests that the domain layer has no forbidden dependencies."""

    def test_domain_does_not_import_infrastructure(self):
        """Domain layer should not depend on infrastructure.

        The tree operations work on in-memory configs and should not
        know where a config was loaded from.
        """
        (
            archrule("domain_no_infrastructure")
            .match("navigation.domain*")
            .should_not_import("navigation.infrastructure*", "infrastructure*")
            .check("navigation")
        )

    def test_domain_does_not_import_application(self):
        """Domain layer should not depend on application layer."""
        (
            archrule("domain_no_application")
            .match("navigation.domain*")
            .should_not_import("navigation.application*")
            .check("navigation")
        )

    def test_domain_does_not_import_fastapi(self):
        """Domain layer should not depend on FastAPI.

        Domain objects should be framework-agnostic.
        """
        (
            archrule("domain_no_fastapi")
            .match("navigation.domain*")
            .should_not_import("fastapi*", "starlette*")
            .check("navigation")
        )


class TestNavigationApplicationLayerBoundaries:
    """Tests that the application layer stays off the web framework."""

    def test_application_does_not_import_presentation(self):
        (
            archrule("application_no_presentation")
            .match("navigation.application*")
            .should_not_import("navigation.presentation*")
            .check("navigation")
        )

    def test_application_does_not_import_fastapi(self):
        (
            archrule("application_no_fastapi")
            .match("navigation.application*")
            .should_not_import("fastapi*", "starlette*")
            .check("navigation")
        )


class TestSharedKernelBoundaries:
    """Tests that the shared kernel does not reach into bounded contexts."""

    def test_shared_kernel_does_not_import_contexts(self):
        (
            archrule("shared_kernel_no_contexts")
            .match("shared_kernel*")
            .should_not_import("navigation*", "iam*")
            .check("shared_kernel")
        )
