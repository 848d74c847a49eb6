# [TEMPLATE: CUI // SP-CTI]
"""Step definitions for banner marking BDD scenarios."""

import sys
from pathlib import Path

from behave import then, when

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from banner_marking.controls import control_vocabulary  # noqa: E402
from banner_marking.controls.aea_marking import AeaMarking  # noqa: E402
from banner_marking.controls.sap_control import SapControl  # noqa: E402
from banner_marking.controls.sci_control import SciControl  # noqa: E402
from banner_marking.resilience.errors import MissingMarkingError  # noqa: E402


def _csv(text):
    return [part for part in text.split(",") if part]


@when('I decode the SCI segment "{segment}"')
def step_decode_sci(context, segment):
    """Parse an SCI segment."""
    context.result = SciControl(segment)


@when('I decode the SAP segment "{segment}"')
def step_decode_sap(context, segment):
    """Parse a SAP segment."""
    context.result = SapControl(segment)


@when('I look up the dissemination banner name "{name}"')
def step_lookup_banner(context, name):
    """Look a dissem control up by banner name."""
    context.result = control_vocabulary.dissem_controls().lookup_by_banner_name(name)


@when('I look up the dissemination portion name "{name}"')
def step_lookup_portion(context, name):
    """Look a dissem control up by portion name."""
    context.result = control_vocabulary.dissem_controls().lookup_by_portion_name(name)


@when('I prefix match nothing against the other dissemination controls')
def step_prefix_none(context):
    """Prefix match None and keep the raised error."""
    try:
        context.result = control_vocabulary.other_dissem_controls().prefix_match(None)
    except MissingMarkingError as e:
        context.error = e


@then('the SCI control should be "{control}"')
def step_check_sci_control(context, control):
    """Verify the SCI control value."""
    assert context.result.control == control, context.result.control


@then('the compartments should be "{names}"')
def step_check_compartments(context, names):
    """Verify compartment names and their order."""
    assert list(context.result.compartments) == _csv(names), list(context.result.compartments)


@then('compartment "{name}" should have sub-compartments "{subs}"')
def step_check_subs(context, name, subs):
    """Verify the sub-compartments of one compartment."""
    assert list(context.result.compartments[name]) == _csv(subs)


@then('the SCI control should render as "{banner}"')
@then('the AEA marking should render as "{banner}"')
@then('the SAP control should render as "{banner}"')
def step_check_render(context, banner):
    """Verify the rendered banner text."""
    assert str(context.result) == banner, str(context.result)


@then('the SAP programs should be "{programs}"')
def step_check_programs(context, programs):
    """Verify the SAP program list."""
    assert list(context.result.programs) == _csv(programs), context.result.programs


@then('the SAP control should be a multiple programs control')
def step_check_multiple(context):
    """Verify the MULTIPLE PROGRAMS shape."""
    assert context.result.is_multiple
    assert context.result.programs == ()


@then('no control should be found')
def step_check_not_found(context):
    """Verify the lookup returned nothing."""
    assert context.result is None, context.result


@then('the control "{key}" should be found')
def step_check_found(context, key):
    """Verify the lookup returned the expected control."""
    assert context.result is not None
    assert context.result.key == key


@then('a missing marking error should be raised')
def step_check_missing_error(context):
    """Verify the MissingMarkingError was raised."""
    assert isinstance(context.error, MissingMarkingError), context.error


@when('I decode the AEA segment "{segment}"')
def step_decode_aea(context, segment):
    """Parse an AEA segment."""
    context.result = AeaMarking(segment)


@then('the AEA type should be "{key}"')
def step_check_aea_type(context, key):
    """Verify the AEA type key."""
    assert context.result.type.key == key, context.result.type.key


@then('the AEA marking should be CNWDI')
def step_check_cnwdi(context):
    """Verify the CNWDI flag is set."""
    assert context.result.cnwdi is True


@then('the SIGMA categories should be "{sigmas}"')
def step_check_sigmas(context, sigmas):
    """Verify the SIGMA list and its order."""
    assert list(context.result.sigmas) == [int(s) for s in _csv(sigmas)], context.result.sigmas
