"""Tests for the swap form reducer."""

from dataclasses import replace
from decimal import Decimal

import pytest

from src.application.use_cases.swap_form import (
    INVALID_FORM,
    PRICES_FAILED,
    SAME_TOKEN_SELECTED,
    DestinationSelected,
    DirectionSwapped,
    Dismissed,
    FormStatus,
    InputChanged,
    PricesFailed,
    PricesLoaded,
    SourceSelected,
    SubmitFailed,
    SubmitRequested,
    SubmitSucceeded,
    SwapFormState,
    current_request,
    is_form_valid,
    reduce,
)
from src.domain.models import PriceEntry, PriceTable


def _table() -> PriceTable:
    return PriceTable(
        {
            "A": PriceEntry("A", Decimal("2")),
            "B": PriceEntry("B", Decimal("4")),
            "C": PriceEntry("C", Decimal("3")),
        }
    )


def _run(*events, state: SwapFormState | None = None) -> SwapFormState:
    current = state or SwapFormState()
    for event in events:
        current = reduce(current, event)
    return current


def _filled() -> SwapFormState:
    return _run(
        PricesLoaded(_table()),
        SourceSelected("A"),
        DestinationSelected("B"),
        InputChanged("10"),
    )


def test_initial_state_is_idle_and_empty() -> None:
    """A fresh form has no output, no error, and is not submittable."""
    state = SwapFormState()

    assert state.status is FormStatus.IDLE
    assert state.output_amount == ""
    assert state.error == ""
    assert is_form_valid(state) is False


def test_filled_form_computes_output() -> None:
    """Editing recomputes the output through the converter."""
    state = _filled()

    assert state.status is FormStatus.VALIDATING
    assert state.output_amount == "5.000000"
    assert state.output_quantity == Decimal("5")
    assert is_form_valid(state) is True


def test_output_is_truncated_to_six_decimals() -> None:
    """Display output truncates rather than rounds."""
    state = _run(
        PricesLoaded(_table()),
        SourceSelected("A"),
        DestinationSelected("C"),
        InputChanged("1"),
    )

    assert state.output_amount == "0.666666"
    assert state.output_quantity == Decimal("2") / Decimal("3")


def test_blank_or_invalid_input_clears_output_without_error() -> None:
    """Incomplete input clears the output silently."""
    for text in ("", "abc", "0", "-3"):
        state = reduce(_filled(), InputChanged(text))
        assert state.output_amount == ""
        assert state.output_quantity is None
        assert state.error == ""
        assert is_form_valid(state) is False


def test_out_of_range_input_clears_output_without_raising() -> None:
    """An amount whose output overflows Decimal is treated as invalid input."""
    state = reduce(_filled(), InputChanged("9e999999"))

    assert state.output_amount == ""
    assert state.output_quantity is None
    assert state.error == ""
    assert is_form_valid(state) is False


def test_selecting_token_used_on_other_side_is_rejected() -> None:
    """A token cannot be chosen for both sides."""
    state = reduce(_filled(), DestinationSelected("A"))

    assert state.error == SAME_TOKEN_SELECTED
    assert state.dest_symbol == "B"
    assert state.output_amount == "5.000000"


def test_clearing_a_selection_clears_output() -> None:
    """Removing a token leaves the form incomplete."""
    state = reduce(_filled(), SourceSelected(None))

    assert state.source_symbol is None
    assert state.output_amount == ""


def test_missing_price_surfaces_error() -> None:
    """A token without a price reports a price error."""
    state = _run(
        SourceSelected("A"),
        DestinationSelected("B"),
        InputChanged("10"),
    )

    assert state.output_amount == ""
    assert "A" in state.error


def test_direction_swap_uses_previous_output_as_input() -> None:
    """Swapping direction re-converts the previous output."""
    state = reduce(_filled(), DirectionSwapped())

    assert state.source_symbol == "B"
    assert state.dest_symbol == "A"
    assert state.input_amount == "5"
    assert state.output_quantity == Decimal("10")
    assert state.output_amount == "10.000000"


def test_direction_swap_keeps_unrounded_output() -> None:
    """The swapped input carries full precision, not the display value."""
    state = _run(
        PricesLoaded(_table()),
        SourceSelected("A"),
        DestinationSelected("C"),
        InputChanged("1"),
        DirectionSwapped(),
    )

    assert state.input_amount != "0.666666"
    assert Decimal(state.input_amount) == Decimal("2") / Decimal("3")


def test_prices_loaded_recomputes_output() -> None:
    """New prices refresh the displayed output."""
    cheaper = PriceTable(
        {
            "A": PriceEntry("A", Decimal("4")),
            "B": PriceEntry("B", Decimal("4")),
        }
    )

    state = reduce(_filled(), PricesLoaded(cheaper))

    assert state.output_amount == "10.000000"


def test_prices_failed_moves_to_failed() -> None:
    """A failed price fetch reports an error."""
    state = reduce(SwapFormState(), PricesFailed())

    assert state.status is FormStatus.FAILED
    assert state.error == PRICES_FAILED


def test_submit_invalid_form_fails() -> None:
    """Submitting an incomplete form fails with a validation message."""
    state = reduce(SwapFormState(), SubmitRequested())

    assert state.status is FormStatus.FAILED
    assert state.error == INVALID_FORM


def test_submit_success_resets_amounts() -> None:
    """A successful submission clears the amounts and keeps tokens."""
    submitting = reduce(_filled(), SubmitRequested())
    assert submitting.status is FormStatus.SUBMITTING

    done = reduce(submitting, SubmitSucceeded())

    assert done.status is FormStatus.SUCCESS
    assert done.input_amount == ""
    assert done.output_amount == ""
    assert done.error == ""
    assert (done.source_symbol, done.dest_symbol) == ("A", "B")


def test_submit_failure_keeps_amounts() -> None:
    """A failed submission reports the failure and keeps the input."""
    submitting = reduce(_filled(), SubmitRequested())

    failed = reduce(submitting, SubmitFailed())

    assert failed.status is FormStatus.FAILED
    assert failed.error == "Swap failed. Please try again."
    assert failed.input_amount == "10"


def test_edits_are_ignored_while_submitting() -> None:
    """Inputs are locked during submission."""
    submitting = reduce(_filled(), SubmitRequested())

    for event in (
        InputChanged("1"),
        SourceSelected("C"),
        DirectionSwapped(),
        SubmitRequested(),
        PricesFailed(),
    ):
        assert reduce(submitting, event) is submitting


def test_outcomes_are_ignored_unless_submitting() -> None:
    """Success or failure events without a submission change nothing."""
    state = _filled()

    assert reduce(state, SubmitSucceeded()) is state
    assert reduce(state, SubmitFailed()) is state


def test_dismiss_returns_to_idle() -> None:
    """Dismissing a result returns to IDLE and clears the error."""
    failed = reduce(SwapFormState(), SubmitRequested())
    succeeded = _run(SubmitRequested(), SubmitSucceeded(), state=_filled())

    assert reduce(failed, Dismissed()) == replace(
        failed,
        status=FormStatus.IDLE,
        error="",
    )
    assert reduce(succeeded, Dismissed()).status is FormStatus.IDLE


def test_edit_after_outcome_matches_dismiss_then_edit() -> None:
    """Editing from SUCCESS or FAILED behaves as Dismissed followed by the edit."""
    failed = _run(SubmitRequested(), SubmitFailed(), state=_filled())
    succeeded = _run(SubmitRequested(), SubmitSucceeded(), state=_filled())

    for outcome in (failed, succeeded):
        edited = reduce(outcome, InputChanged("4"))
        assert edited == reduce(reduce(outcome, Dismissed()), InputChanged("4"))
        assert edited.status is FormStatus.VALIDATING
        assert edited.error == ""
        assert edited.output_amount == "2.000000"


def test_success_and_error_are_never_set_together() -> None:
    """Every reachable SUCCESS state has an empty error."""
    state = _run(
        SubmitRequested(),
        PricesLoaded(_table()),
        SourceSelected("A"),
        DestinationSelected("B"),
        InputChanged("10"),
        SubmitRequested(),
        SubmitSucceeded(),
    )

    assert state.status is FormStatus.SUCCESS
    assert state.error == ""


def test_current_request_requires_complete_form() -> None:
    """No request is built until both tokens and an amount are set."""
    assert current_request(SwapFormState()) is None
    request = current_request(_filled())
    assert (request.source_symbol, request.dest_symbol) == ("A", "B")
    assert request.input_quantity == "10"


def test_unknown_event_raises() -> None:
    """Unsupported events are programming errors."""
    with pytest.raises(TypeError):
        reduce(SwapFormState(), object())
