#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Demonstration of onboarding a device with the Cumulocity core client.

This script shows how to:
1. Build a client around the in-memory adapter
2. Create a device managed object
3. Bind a serial number to it as an external ID
4. Send a measurement and raise an alarm
5. Observe calls and errors through lifecycle hooks

Point ``CumulocityClient`` at a real tenant (``base_url``, ``tenant``,
``username``, ``password``) to run the same flow against the platform.
"""

import asyncio

from cumulocity import CumulocityClient, MockAdapter, StructuredApiError
from cumulocity.logging_config import setup_logging
from cumulocity.models import Alarm, ExternalId, ManagedObject, Measurement
from cumulocity.models.alarms import AlarmSeverity
from cumulocity.models.common import SourceReference


def canned_platform() -> MockAdapter:
    """In-memory responses for the calls this demo makes."""
    adapter = MockAdapter()
    adapter.add_response(
        "POST",
        "/inventory/managedObjects",
        status_code=201,
        json_body={"id": "1001", "name": "Pump 7", "c8y_IsDevice": {}},
    )
    adapter.add_response(
        "POST",
        "/identity/globalIds/1001/externalIds",
        status_code=201,
        json_body={"externalId": "SN-7", "type": "c8y_Serial", "managedObject": {"id": "1001"}},
    )
    adapter.add_response(
        "POST",
        "/measurement/measurements",
        status_code=201,
        json_body={"id": "m-1", "type": "c8y_PressureMeasurement"},
    )
    adapter.add_response(
        "POST",
        "/alarm/alarms",
        status_code=201,
        json_body={"id": "a-1", "type": "c8y_PressureHigh", "status": "ACTIVE", "count": 1},
    )
    return adapter


async def main():
    """Run the onboarding demonstration."""
    setup_logging(level="WARNING", json_format=False)

    print("=" * 60)
    print("Cumulocity Core Client Demonstration")
    print("=" * 60)

    async with CumulocityClient(adapter=canned_platform()) as client:
        client.hooks.on_after_response(
            lambda response: print(f"   <- {response.status_code} {response.request.path}")
        )
        client.hooks.on_error(lambda error: print(f"   !! {error}"))

        print("\n1. Creating device...")
        device = await client.inventory.managed_objects.create_managed_object(
            ManagedObject(name="Pump 7", type="c8y_Pump", c8y_is_device={})
        )
        print(f"   Device created: {device.id}")

        print("\n2. Binding serial number...")
        await client.identity.create_external_id(
            ExternalId(external_id="SN-7", type="c8y_Serial"), device.id
        )

        print("\n3. Sending measurement...")
        await client.measurements.create_measurement(
            Measurement(
                type="c8y_PressureMeasurement",
                time="2026-10-19T08:00:00.000Z",
                source=SourceReference(id=device.id),
                custom_fragments={"c8y_Pressure": {"P": {"value": 3.2, "unit": "bar"}}},
            )
        )

        print("\n4. Raising alarm...")
        alarm = await client.alarms.create_alarm(
            Alarm(
                type="c8y_PressureHigh",
                text="Pressure above threshold",
                time="2026-10-19T08:00:01.000Z",
                severity=AlarmSeverity.MAJOR,
                source=SourceReference(id=device.id),
            )
        )
        print(f"   Alarm {alarm.id} is {alarm.status.value}")

        print("\n5. Looking up an unknown device...")
        try:
            await client.inventory.managed_objects.get_managed_object("4242")
        except StructuredApiError as e:
            print(f"   Platform answered {e.status_code}: {e.error.error}")

    print("\nDone.")


if __name__ == "__main__":
    asyncio.run(main())
