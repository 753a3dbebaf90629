import asyncio

import pytest
from kungfu import Error, Ok

from storefront import payment as Pay
from storefront._types import (
    BusyError,
    CartNotFoundError,
    CheckoutClosedError,
    StaleResponseError,
)
from storefront.checkout import CheckoutSession
from storefront.promotions import PromotionRejectedError
from storefront.steps import Step, StepGateError
from storefront.submission import PaymentNotConfirmedError


@pytest.fixture
def session(backend, make_cart, settings):
    backend.cart = make_cart()
    return CheckoutSession(backend, backend.cart, settings)


@pytest.mark.asyncio
async def test_open_reads_cart(backend, make_cart, settings):
    backend.cart = make_cart()

    match await CheckoutSession.open(backend, settings=settings):
        case Ok(session):
            assert session.cart is backend.cart
        case Error(e):
            pytest.fail(f"unexpected error: {e}")


@pytest.mark.asyncio
async def test_open_without_cart(backend, settings):
    match await CheckoutSession.open(backend, settings=settings):
        case Error(CartNotFoundError()):
            pass
        case other:
            pytest.fail(f"expected CartNotFoundError, got {other}")


@pytest.mark.asyncio
async def test_full_checkout_walk(session, backend, address):
    assert session.progress().active is Step.ADDRESS

    assert isinstance(await session.submit_addresses(address, email="ada@example.com"), Ok)
    assert session.cart.billing_address == address
    assert session.progress("review").active is Step.DELIVERY

    assert isinstance(await session.select_shipping_method("so_standard"), Ok)
    assert session.progress("review").active is Step.PAYMENT

    assert isinstance(await session.select_payment_provider("pp_system_default"), Ok)
    assert session.progress("review").active is Step.REVIEW
    assert (await session.submit_affordance()).action is Pay.SubmitAction.PLACE_ORDER

    match await session.submit_order():
        case Ok(order):
            assert order.email == "ada@example.com"
        case Error(e):
            pytest.fail(f"unexpected error: {e}")
    assert session.closed


@pytest.mark.asyncio
async def test_separate_billing_address(session, address):
    billing = type(address)(
        first_name="Charles",
        last_name="Babbage",
        address_1="1 Dorset Street",
        city="London",
        postal_code="W1U 4EG",
        country_code="gb",
    )

    await session.submit_addresses(address, billing, same_as_billing=False)

    assert session.cart.shipping_address == address
    assert session.cart.billing_address == billing


@pytest.mark.asyncio
async def test_enter_step_is_gated(session):
    match await session.enter_step("payment"):
        case Error(StepGateError(redirect_to=step)):
            assert step is Step.ADDRESS
        case other:
            pytest.fail(f"expected StepGateError, got {other}")

    assert await session.enter_step(None) == Ok(Step.ADDRESS)


@pytest.mark.asyncio
async def test_commands_are_refused_while_busy(session, backend):
    backend.gate = asyncio.Event()

    pending = asyncio.create_task(session.apply_code("SUMMER10"))
    await asyncio.sleep(0)

    match await session.enter_step("address"):
        case Error(BusyError()):
            pass
        case other:
            pytest.fail(f"expected BusyError, got {other}")
    match await session.select_payment_provider("pp_system_default"):
        case Error(BusyError()):
            pass
        case other:
            pytest.fail(f"expected BusyError, got {other}")

    backend.gate.set()
    assert isinstance(await pending, Ok)
    assert backend.commands("initiate_payment_session") == []


@pytest.mark.asyncio
async def test_response_for_superseded_cart_is_discarded(session, backend, make_cart):
    backend.gate = asyncio.Event()
    pending = asyncio.create_task(session.apply_code("SUMMER10"))
    await asyncio.sleep(0)

    replacement = make_cart(id="cart_2")
    session.load(replacement)
    backend.gate.set()

    match await pending:
        case Error(StaleResponseError(cart_id=cart_id)):
            assert cart_id == "cart_1"
        case other:
            pytest.fail(f"expected StaleResponseError, got {other}")
    assert session.cart is replacement


@pytest.mark.asyncio
async def test_rejected_code_still_applies_fresh_cart(session, backend):
    revision = session.revision

    match await session.apply_code("NOPE"):
        case Error(PromotionRejectedError()):
            pass
        case other:
            pytest.fail(f"expected PromotionRejectedError, got {other}")
    assert session.cart is backend.cart
    assert session.revision == revision + 1


@pytest.mark.asyncio
async def test_interactive_payment_needs_confirmation(backend, ready_cart, settings):
    backend.cart = ready_cart("pp_system_default")
    session = CheckoutSession(backend, backend.cart, settings)

    await session.select_payment_provider("pp_stripe_stripe")
    flow = session.payment_flow()
    assert isinstance(flow, Pay.Interactive)
    assert (await session.submit_affordance()).action is Pay.SubmitAction.CONFIRM_PAYMENT

    match await session.submit_order():
        case Error(PaymentNotConfirmedError()):
            pass
        case other:
            pytest.fail(f"expected PaymentNotConfirmedError, got {other}")

    declined = session.confirm_payment(Pay.ProviderOutcome(status="requires_payment_method", error="declined"))
    assert isinstance(declined, Error)
    assert session.confirmation is None

    confirmed = session.confirm_payment(Pay.ProviderOutcome(status="succeeded", session_id=flow.session_id))
    assert isinstance(confirmed, Ok)
    assert isinstance(await session.submit_order(), Ok)


@pytest.mark.asyncio
async def test_switching_provider_drops_confirmation(backend, ready_cart, settings):
    backend.cart = ready_cart("pp_stripe_stripe")
    session = CheckoutSession(backend, backend.cart, settings)
    session.confirm_payment(Pay.ProviderOutcome(status="requires_capture"))
    assert session.confirmation is not None

    await session.select_payment_provider("pp_paypal_paypal")

    assert session.confirmation is None


@pytest.mark.asyncio
async def test_closed_session_refuses_every_command(backend, ready_cart, settings, address):
    backend.cart = ready_cart("pp_system_default")
    session = CheckoutSession(backend, backend.cart, settings)
    assert isinstance(await session.submit_order(), Ok)

    results = [
        await session.submit_order(),
        await session.apply_code("SUMMER10"),
        await session.remove_code("SUMMER10"),
        await session.select_payment_provider("pp_stripe_stripe"),
        await session.submit_addresses(address),
        await session.select_shipping_method("so_standard"),
        await session.enter_step("review"),
        await session.refresh(),
        session.confirm_payment(Pay.ProviderOutcome(status="succeeded")),
    ]

    for result in results:
        match result:
            case Error(CheckoutClosedError()):
                pass
            case other:
                pytest.fail(f"expected CheckoutClosedError, got {other}")
    assert backend.commands("place_order") == ["cart_1"]
    assert not (await session.submit_affordance()).enabled


@pytest.mark.asyncio
async def test_refresh_replaces_snapshot(session, backend, make_cart):
    backend.cart = make_cart(email="grace@example.com")

    assert isinstance(await session.refresh(), Ok)
    assert session.cart.email == "grace@example.com"


@pytest.mark.asyncio
async def test_reselecting_active_provider_is_refused_while_busy(backend, ready_cart, settings):
    backend.cart = ready_cart("pp_system_default")
    session = CheckoutSession(backend, backend.cart, settings)
    backend.gate = asyncio.Event()

    pending = asyncio.create_task(session.apply_code("SUMMER10"))
    await asyncio.sleep(0)

    match await session.select_payment_provider("pp_system_default"):
        case Error(BusyError(cart_id=cart_id)):
            assert cart_id == "cart_1"
        case other:
            pytest.fail(f"expected BusyError, got {other}")

    backend.gate.set()
    assert isinstance(await pending, Ok)
    assert session.cart.promotion_codes == ("SUMMER10",)
    assert session.cart is backend.cart
    assert backend.commands("initiate_payment_session") == []


@pytest.mark.asyncio
async def test_reselecting_active_provider_keeps_snapshot(backend, ready_cart, settings):
    backend.cart = ready_cart("pp_system_default")
    session = CheckoutSession(backend, backend.cart, settings)
    snapshot, revision = session.cart, session.revision

    assert await session.select_payment_provider("pp_system_default") == Ok(snapshot)

    assert session.cart is snapshot
    assert session.revision == revision
    assert backend.commands("initiate_payment_session") == []


@pytest.mark.asyncio
async def test_submit_is_disabled_while_order_is_in_flight(backend, ready_cart, settings):
    backend.cart = ready_cart("pp_system_default")
    session = CheckoutSession(backend, backend.cart, settings)
    assert (await session.submit_affordance()).action is Pay.SubmitAction.PLACE_ORDER
    backend.gate = asyncio.Event()

    pending = asyncio.create_task(session.submit_order())
    await asyncio.sleep(0)

    affordance = await session.submit_affordance()
    assert not affordance.enabled
    assert affordance.reason == "busy"

    backend.gate.set()
    assert isinstance(await pending, Ok)
    assert (await session.submit_affordance()).reason == "checkout_closed"
    assert backend.commands("place_order") == ["cart_1"]
