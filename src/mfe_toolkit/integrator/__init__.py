"""Integration preparation -- repackages a microfrontend for the host project."""

from mfe_toolkit.integrator.checklist import ChecklistEmitter
from mfe_toolkit.integrator.manifest import transform_manifest
from mfe_toolkit.integrator.preparer import IntegrationPreparer, prepare_integration

__all__ = [
    "ChecklistEmitter",
    "IntegrationPreparer",
    "prepare_integration",
    "transform_manifest",
]
