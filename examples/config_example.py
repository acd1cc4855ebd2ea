#!/usr/bin/env python3
"""
Example of using the configuration system to create a geocoder service
"""

from nominatim_services import GeocoderServiceProvider, InvalidConfigurationError
from nominatim_services.config import default_config, write_config_file
from nominatim_services.core import (
    ForwardGeocodingQueryRequestParameters,
    RequestError,
    configure_logging,
)


def main():
    """Demonstrate configuration system usage"""

    configure_logging(level="INFO", format_type="text", service_name="geocoder-example")

    print("=== Geocoding Services Configuration Example ===\n")

    # Option 1: Write the environment-based template so it can be edited
    print("1. Configuration template:")
    write_config_file(default_config(), "./nominatim.example.yaml")
    print("   Written to ./nominatim.example.yaml")

    # Option 2: Override the template from application code
    print("\n2. Custom configuration:")
    provider = GeocoderServiceProvider(config={
        "service": "nominatim",
        "language": "en",
        "services": {
            "nominatim": {
                "user_agent": "geocoder-example/0.1",
                "email": "ops@example.com",
            },
        },
    })

    try:
        service = provider.geocoder_service
        print(f"   ✓ {service.__class__.__name__} created for {service.config.url}")
    except InvalidConfigurationError as e:
        print(f"   ✗ Invalid configuration: {e}")
        return

    # Option 3: Use the service
    print("\n3. Forward geocoding:")
    try:
        response = service.request_forward_geocoding(
            ForwardGeocodingQueryRequestParameters.make("Dam, Amsterdam", limit=3)
        )
        for place in response.items:
            print(f"   {place.place_id}: {place.display_name}")
    except RequestError as e:
        print(f"   ✗ Request failed: {e}")
    finally:
        provider.close()


if __name__ == "__main__":
    main()
