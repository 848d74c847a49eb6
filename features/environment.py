# [TEMPLATE: CUI // SP-CTI]
"""Behave environment configuration for banner marking BDD tests."""

import sys
from pathlib import Path


def before_all(context):
    """Put the checkout on sys.path and load the control vocabularies once."""
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))
    context.project_root = project_root

    # A broken banner_controls.yaml fails the run here, not inside a step.
    from banner_marking.controls import control_vocabulary
    context.registries = {name: control_vocabulary.get_registry(name)
                          for name in control_vocabulary.list_registries()}


def before_scenario(context, scenario):
    """Clear the decoded value and captured error from the last scenario."""
    context.result = None
    context.error = None
