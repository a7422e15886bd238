"""Poll the MeteoSwiss feed every 10 minutes and log the latest readings."""

import logging
import time

from meteoswiss import (
    LatestResult,
    MeteoSwissClient,
    PipelineConfig,
    Scheduler,
    configure_logging,
    measurement_job,
)

log = logging.getLogger("meteoswiss.example")


def main() -> None:
    configure_logging(level=logging.INFO)
    config = PipelineConfig()
    latest = LatestResult()

    with MeteoSwissClient.from_config(config) as client:
        stations = {s.abbreviation: s for s in client.fetch_stations()}
        log.info("Loaded %d stations", len(stations))

        job = measurement_job(client, latest)
        job()  # fill the sink before the first boundary

        with Scheduler.from_config(job, config).start():
            try:
                while True:
                    time.sleep(60)
                    snap = latest.snapshot()
                    if snap.error is not None:
                        log.warning("Last fetch failed: %s", snap.error)
                    for point in snap.records[:5]:
                        name = stations[point.station].name if point.station in stations else point.station
                        temp = f"{point.temperature}°C" if point.temperature is not None else "N/A"
                        log.info("%s @ %s: %s", name, point.datetime, temp)
            except KeyboardInterrupt:
                pass


if __name__ == "__main__":
    main()
