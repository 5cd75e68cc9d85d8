"""Swap form state machine.

The form is an immutable snapshot advanced by a pure reducer. Every edit
re-runs the rate converter so the displayed output always reflects the
current prices, amount, and token selection.

Status transitions::

    IDLE -> VALIDATING -> SUBMITTING -> SUCCESS | FAILED -> IDLE

An edit made from SUCCESS or FAILED dismisses the outcome first, so it
passes through IDLE on its way to VALIDATING.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum

from src.domain.models import (
    ConversionOutcome,
    ConversionRequest,
    ConversionResult,
    InvalidQuantityError,
    PriceTable,
)
from src.domain.services import convert

SAME_TOKEN_SELECTED = "Cannot select the same token"
INVALID_FORM = "Please check your input"
SWAP_FAILED = "Swap failed. Please try again."
PRICES_FAILED = "Failed to fetch token prices"


class FormStatus(str, Enum):
    """Lifecycle status of the swap form."""

    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class SwapFormState:
    """Snapshot of the swap form.

    Attributes:
        prices: Current price table.
        input_amount: Raw amount text typed by the user.
        output_amount: Output truncated to six decimals, or "".
        output_quantity: Unrounded output backing output_amount.
        source_symbol: Token to send.
        dest_symbol: Token to receive.
        status: Lifecycle status.
        error: Message shown to the user, or "".
    """

    prices: PriceTable = field(default_factory=PriceTable)
    input_amount: str = ""
    output_amount: str = ""
    output_quantity: Decimal | None = None
    source_symbol: str | None = None
    dest_symbol: str | None = None
    status: FormStatus = FormStatus.IDLE
    error: str = ""


@dataclass(frozen=True)
class PricesLoaded:
    table: PriceTable


@dataclass(frozen=True)
class PricesFailed:
    message: str = PRICES_FAILED


@dataclass(frozen=True)
class InputChanged:
    text: str


@dataclass(frozen=True)
class SourceSelected:
    symbol: str | None


@dataclass(frozen=True)
class DestinationSelected:
    symbol: str | None


@dataclass(frozen=True)
class DirectionSwapped:
    pass


@dataclass(frozen=True)
class SubmitRequested:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    pass


@dataclass(frozen=True)
class SubmitFailed:
    message: str = SWAP_FAILED


@dataclass(frozen=True)
class Dismissed:
    pass


SwapFormEvent = (
    PricesLoaded
    | PricesFailed
    | InputChanged
    | SourceSelected
    | DestinationSelected
    | DirectionSwapped
    | SubmitRequested
    | SubmitSucceeded
    | SubmitFailed
    | Dismissed
)

_EDIT_EVENTS = (
    PricesLoaded,
    InputChanged,
    SourceSelected,
    DestinationSelected,
    DirectionSwapped,
)

_OUTCOMES = (FormStatus.SUCCESS, FormStatus.FAILED)


def current_request(state: SwapFormState) -> ConversionRequest | None:
    """Return the conversion request described by the form, if complete."""
    if not state.source_symbol or not state.dest_symbol:
        return None
    if not state.input_amount.strip():
        return None
    return ConversionRequest(
        source_symbol=state.source_symbol,
        dest_symbol=state.dest_symbol,
        input_quantity=state.input_amount,
    )


def current_conversion(state: SwapFormState) -> ConversionOutcome | None:
    """Run the converter for the form, or None when the form is incomplete."""
    request = current_request(state)
    if request is None:
        return None
    return convert(state.prices, request)


def is_form_valid(state: SwapFormState) -> bool:
    """Return True when the form can be submitted."""
    return isinstance(current_conversion(state), ConversionResult)


def reduce(state: SwapFormState, event: SwapFormEvent) -> SwapFormState:
    """Return the state that follows an event.

    Edits are ignored while a submission is in flight, and submission
    outcomes are ignored unless one is.

    Args:
        state: Current form snapshot.
        event: Event raised by the user or a collaborator.

    Returns:
        SwapFormState: Next form snapshot.
    """
    if isinstance(event, PricesFailed):
        if state.status is FormStatus.SUBMITTING:
            return state
        return replace(state, status=FormStatus.FAILED, error=event.message)

    if isinstance(event, _EDIT_EVENTS):
        if state.status is FormStatus.SUBMITTING:
            return state
        if state.status in _OUTCOMES:
            state = reduce(state, Dismissed())
        return _apply_edit(state, event)

    if isinstance(event, SubmitRequested):
        if state.status is FormStatus.SUBMITTING:
            return state
        if not is_form_valid(state):
            return replace(state, status=FormStatus.FAILED, error=INVALID_FORM)
        return replace(state, status=FormStatus.SUBMITTING, error="")

    if isinstance(event, SubmitSucceeded):
        if state.status is not FormStatus.SUBMITTING:
            return state
        return replace(
            state,
            input_amount="",
            output_amount="",
            output_quantity=None,
            status=FormStatus.SUCCESS,
            error="",
        )

    if isinstance(event, SubmitFailed):
        if state.status is not FormStatus.SUBMITTING:
            return state
        return replace(state, status=FormStatus.FAILED, error=event.message)

    if isinstance(event, Dismissed):
        if state.status in _OUTCOMES:
            return replace(state, status=FormStatus.IDLE, error="")
        return state

    raise TypeError(f"Unsupported swap form event: {event!r}")


def _apply_edit(state: SwapFormState, event) -> SwapFormState:
    editing = replace(state, status=FormStatus.VALIDATING, error="")

    if isinstance(event, PricesLoaded):
        return _recalculate(replace(editing, prices=event.table))
    if isinstance(event, InputChanged):
        return _recalculate(replace(editing, input_amount=event.text))
    if isinstance(event, SourceSelected):
        if _conflicts(event.symbol, state.dest_symbol):
            return replace(editing, error=SAME_TOKEN_SELECTED)
        return _recalculate(replace(editing, source_symbol=event.symbol))
    if isinstance(event, DestinationSelected):
        if _conflicts(event.symbol, state.source_symbol):
            return replace(editing, error=SAME_TOKEN_SELECTED)
        return _recalculate(replace(editing, dest_symbol=event.symbol))

    # Direction swap: the previous output becomes the new input.
    new_input = (
        format(state.output_quantity, "f")
        if state.output_quantity is not None
        else state.input_amount
    )
    return _recalculate(
        replace(
            editing,
            source_symbol=state.dest_symbol,
            dest_symbol=state.source_symbol,
            input_amount=new_input,
        )
    )


def _conflicts(symbol: str | None, other: str | None) -> bool:
    return symbol is not None and symbol == other


def _recalculate(state: SwapFormState) -> SwapFormState:
    outcome = current_conversion(state)
    if outcome is None or isinstance(outcome, InvalidQuantityError):
        return replace(state, output_amount="", output_quantity=None)
    if isinstance(outcome, ConversionResult):
        return replace(
            state,
            output_amount=outcome.display_value,
            output_quantity=outcome.output_quantity,
        )
    return replace(
        state,
        output_amount="",
        output_quantity=None,
        error=outcome.message,
    )


__all__ = [
    "FormStatus",
    "SwapFormState",
    "SwapFormEvent",
    "PricesLoaded",
    "PricesFailed",
    "InputChanged",
    "SourceSelected",
    "DestinationSelected",
    "DirectionSwapped",
    "SubmitRequested",
    "SubmitSucceeded",
    "SubmitFailed",
    "Dismissed",
    "SAME_TOKEN_SELECTED",
    "INVALID_FORM",
    "SWAP_FAILED",
    "PRICES_FAILED",
    "current_request",
    "current_conversion",
    "is_form_valid",
    "reduce",
]
