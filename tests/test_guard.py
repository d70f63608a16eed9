import asyncio

from brand_admin.guard import InFlightGuard


async def test_second_trigger_is_skipped_while_first_runs():
    guard = InFlightGuard()
    release = asyncio.Event()
    calls = []

    async def trigger():
        async with guard.acquire("delete", "b1") as proceed:
            if proceed:
                calls.append("delete")
                await release.wait()
            return proceed

    first = asyncio.create_task(trigger())
    await asyncio.sleep(0)
    second = await trigger()
    release.set()

    assert await first is True
    assert second is False
    assert calls == ["delete"]
    assert not guard.is_in_flight("delete", "b1")


async def test_different_brands_and_actions_do_not_block():
    guard = InFlightGuard()

    async with guard.acquire("delete", "b1") as first:
        async with guard.acquire("delete", "b2") as other_brand:
            async with guard.acquire("hard-delete", "b1") as other_action:
                assert (first, other_brand, other_action) == (True, True, True)


async def test_slot_is_released_after_error():
    guard = InFlightGuard()

    try:
        async with guard.acquire("delete", "b1"):
            raise RuntimeError("backend down")
    except RuntimeError:
        pass

    assert not guard.is_in_flight("delete", "b1")
