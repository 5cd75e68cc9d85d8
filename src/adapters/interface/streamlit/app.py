"""Streamlit entry point for the swap form and wallet page."""

from collections.abc import Sequence

import httpx
import streamlit as st

from src.application.use_cases.get_price_table import GetPriceTableUseCase
from src.application.use_cases.get_ranked_balances import (
    GetRankedBalancesUseCase,
)
from src.application.use_cases.submit_swap import SubmitSwapUseCase
from src.application.use_cases.swap_form import (
    DestinationSelected,
    DirectionSwapped,
    Dismissed,
    FormStatus,
    InputChanged,
    PricesFailed,
    PricesLoaded,
    SourceSelected,
    SwapFormEvent,
    SwapFormState,
    is_form_valid,
    reduce,
)
from src.domain.models import PriceTable, RankedBalance
from src.infrastructure.container import (
    build_balance_source,
    build_fiat_price_source,
    build_price_source,
    build_swap_executor,
)
from src.infrastructure.settings import WalletSettings

_FORM_KEY = "swap_form"


def _fetch_price_table() -> PriceTable:
    """Fetch the current price table from the price feed."""
    use_case = GetPriceTableUseCase(build_price_source())
    return use_case.execute()


@st.cache_data(show_spinner=False, ttl=60)
def _load_price_table() -> PriceTable:
    """Cached wrapper around _fetch_price_table for Streamlit sessions."""
    return _fetch_price_table()


def _fetch_ranked_balances(table: PriceTable) -> list[RankedBalance]:
    """Rank wallet balances valued with the given price table."""
    settings = WalletSettings.from_env()
    use_case = GetRankedBalancesUseCase(
        build_balance_source(settings),
        build_fiat_price_source(table),
        merge_duplicates=settings.merge_duplicate_balances,
    )
    return use_case.execute()


def _form_state() -> SwapFormState:
    """Return the form snapshot stored in the session."""
    if _FORM_KEY not in st.session_state:
        st.session_state[_FORM_KEY] = SwapFormState()
    return st.session_state[_FORM_KEY]


def _dispatch(event: SwapFormEvent) -> SwapFormState:
    """Reduce the session form state with an event and store the result."""
    state = reduce(_form_state(), event)
    st.session_state[_FORM_KEY] = state
    return state


def _balance_rows(rows: Sequence[RankedBalance]) -> list[dict[str, str]]:
    """Prepare ranked balances for a dataframe."""
    return [
        {
            "Blockchain": row.blockchain,
            "Currency": row.currency,
            "Amount": row.formatted_amount,
            "USD Value": f"{row.fiat_value:,.2f}",
        }
        for row in rows
    ]


def _token_label(symbol: str) -> str:
    return symbol or "Select token"


def _symbol_index(symbols: Sequence[str], selected: str | None) -> int:
    if selected in symbols:
        return list(symbols).index(selected)
    return 0


def _render_swap_form(state: SwapFormState) -> None:
    """Render the swap form and dispatch the events it raises."""
    st.subheader("Swap Tokens")
    if state.status is FormStatus.SUCCESS:
        st.success("Swap completed successfully!")
    if state.error:
        st.error(state.error)
    if state.status in (FormStatus.SUCCESS, FormStatus.FAILED):
        if st.button("Dismiss"):
            state = _dispatch(Dismissed())

    options = [""] + state.prices.symbols

    send_col, send_token_col = st.columns([2, 1])
    amount = send_col.text_input(
        "Amount to send",
        value=state.input_amount,
        placeholder="0.0",
    )
    if amount != state.input_amount:
        state = _dispatch(InputChanged(amount))
    source = send_token_col.selectbox(
        "From",
        options,
        index=_symbol_index(options, state.source_symbol),
        format_func=_token_label,
    )
    if (source or None) != state.source_symbol:
        state = _dispatch(SourceSelected(source or None))

    if st.button("⇅ Swap direction"):
        state = _dispatch(DirectionSwapped())

    receive_col, receive_token_col = st.columns([2, 1])
    receive_col.text_input(
        "Amount to receive",
        value=state.output_amount,
        placeholder="0.0",
        disabled=True,
    )
    dest = receive_token_col.selectbox(
        "To",
        options,
        index=_symbol_index(options, state.dest_symbol),
        format_func=_token_label,
    )
    if (dest or None) != state.dest_symbol:
        state = _dispatch(DestinationSelected(dest or None))

    if st.button("Swap Tokens", disabled=not is_form_valid(state)):
        with st.spinner("Processing..."):
            result = SubmitSwapUseCase(build_swap_executor()).execute(state)
        st.session_state[_FORM_KEY] = result
        st.rerun()


def _render_wallet(rows: Sequence[RankedBalance]) -> None:
    """Render ranked wallet balances."""
    st.subheader("Wallet")
    if not rows:
        st.warning("No positive balances to display.")
        return
    st.caption(f"{len(rows)} balances shown")
    st.dataframe(_balance_rows(rows), hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Wallet Swap", layout="centered")
    st.title("Wallet Swap")

    page = st.sidebar.selectbox("Page", ["Swap", "Wallet"])
    try:
        table = _load_price_table()
    except httpx.HTTPError:
        table = None

    if page == "Swap":
        state = _form_state()
        if table is None:
            state = _dispatch(PricesFailed())
        elif table != state.prices:
            state = _dispatch(PricesLoaded(table))
        _render_swap_form(state)
    else:
        try:
            rows = _fetch_ranked_balances(table or PriceTable())
        except RuntimeError as exc:
            st.warning(str(exc))
            return
        _render_wallet(rows)


if __name__ == "__main__":  # pragma: no cover
    main()
