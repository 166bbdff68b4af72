"""Basic usage examples for the weather insert pipeline."""

import asyncio

from weather_insert import (
    Provider,
    Settings,
    TextDocument,
    Units,
    WeatherInsertError,
    WeatherInsertService,
    insert_weather_frontmatter,
)


async def main() -> None:
    settings = Settings(location="London", units=Units.METRIC)
    service = WeatherInsertService(settings)

    # Raw normalized record
    print("=== Open-Meteo record ===")
    try:
        record = await service.fetch_weather()
    except WeatherInsertError as exc:
        print(f"  Failed: {exc}")
        return
    for field, value in record.model_dump().items():
        print(f"  {field}: {value}")

    # Rendered line with humidity turned on
    print("\n=== Rendered line ===")
    humid = WeatherInsertService(
        settings.model_copy(update={
            "template": "{icon} {temp} (feels {feelsLike}) | Humidity: {humidity}",
            "show_humidity": True,
        })
    )
    print(f"  {await humid.produce_weather_line()}")

    # Same location through wttr.in
    print("\n=== wttr.in line ===")
    wttr = WeatherInsertService(settings.model_copy(update={"provider": Provider.WTTR}))
    print(f"  {await wttr.produce_weather_line()}")

    # Frontmatter added to a note
    print("\n=== Note with frontmatter ===")
    note = TextDocument("# Daily log\n\nWent for a walk.")
    await insert_weather_frontmatter(note, service, lambda message: print(f"  [{message}]"))
    print(note.get_value())


if __name__ == "__main__":
    asyncio.run(main())
