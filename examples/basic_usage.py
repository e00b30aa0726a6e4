#!/usr/bin/env python3
"""Example usage of Atrea Assistant library.

This example demonstrates how to read and control an Atrea RD5 ventilation unit.
"""

import logging
from atreaassistant import (
    AtreaClient,
    AtreaException,
    TemperatureControl,
    current_temperature,
    extract_common_parameters,
    get_parameter_name,
    load_config,
    outdoor_temperature,
)

# Setup logging to see what's happening
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def main():
    """Main example function."""
    # Configuration (update config.env to match your unit)
    config = load_config("config.env")

    print("Atrea Assistant - Example Usage")
    print("=" * 50)

    # Create client (context manager closes the HTTP session)
    with AtreaClient.from_config(config) as client:
        try:
            session = client.authenticate(config.password)
            print(f"\nLogged in to {config.host} (session {session})")

            snapshot = client.snapshot()
            print(f"Received {len(snapshot)} parameters")
            print(f"  - Indoor:  {current_temperature(snapshot):.1f} C")
            print(f"  - Outdoor: {outdoor_temperature(snapshot):.1f} C")

            common = extract_common_parameters(snapshot)
            print(f"  - {get_parameter_name('H10715')}: {common.operating_mode}")
            print(f"  - {get_parameter_name('H11021')}: {common.desired_temperature}")

            # Example: set 21 C in heating mode
            TemperatureControl(client).set_desired_temperature(21, 1)
            print("\nDesired temperature updated")

        except AtreaException as e:
            print(f"Error communicating with device: {e}")

    print("\nDone")

if __name__ == "__main__":
    main()
