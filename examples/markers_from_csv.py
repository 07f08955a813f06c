# examples/markers_from_csv.py
# Builds docs/airports.html: one marker per large airport of a country, read from the
# OurAirports CSV, with a custom icon and a shared info window.
# If the data fetch fails, writes a fallback page so the page still serves something.

import argparse
import html
import sys

from gmapkit import GoogleMap, MapsConfig, MarkerIcon
from gmapkit.frames import add_frame, load_points
from gmapkit.pages import write_error_page, write_page

# ---------- config ----------
AIRPORTS_CSV = "https://raw.githubusercontent.com/davidmegginson/ourairports-data/main/airports.csv"
USECOLS = ["iata_code", "latitude_deg", "longitude_deg", "type", "name", "iso_country"]
ICON_URL = "https://maps.google.com/mapfiles/kml/shapes/airports.png"
ICON_SIZE = 32

OUT_FILE = "docs/airports.html"
PAGE_TITLE = "Large airports"


def popup(row) -> str:
    return "<b>{name}</b><br>IATA: {iata}".format(
        name=html.escape(str(row["name"])), iata=html.escape(str(row["iata_code"]))
    )


def build_map(config: MapsConfig, country: str, source: str) -> GoogleMap:
    df = load_points(source, lat="latitude_deg", lng="longitude_deg", usecols=USECOLS)
    df = df[df["type"].eq("large_airport") & df["iso_country"].eq(country.upper())]
    if df.empty:
        raise RuntimeError(f"No large airports found for {country!r}.")

    # explicit size, so no image download happens here
    icon = MarkerIcon(ICON_URL, width=ICON_SIZE, height=ICON_SIZE).set_scaled_size(ICON_SIZE, ICON_SIZE)

    gmap = GoogleMap(map_id="airports", config=config, height="600px")
    gmap.compress_info_windows()
    add_frame(gmap, df, lat="latitude_deg", lng="longitude_deg", title="name", content=popup, icon=icon)
    return gmap


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--country", default="US", help="ISO country code")
    ap.add_argument("--csv", default=AIRPORTS_CSV, help="airports CSV path or URL")
    ap.add_argument("--config", default=None)
    ap.add_argument("--out", default=OUT_FILE)
    args = ap.parse_args()

    try:
        gmap = build_map(MapsConfig.load(args.config), args.country, args.csv)
        write_page(gmap, args.out, title=PAGE_TITLE)
        print("Wrote", args.out)
    except Exception as e:
        print("ERROR building map:", e, file=sys.stderr)
        write_error_page(args.out, PAGE_TITLE, str(e))
        print("Wrote fallback page:", args.out)
        sys.exit(0)


if __name__ == "__main__":
    main()
