# examples/geolocation.py
# Builds docs/geolocation.html: a map centered on the visitor, falling back to a geocoded
# address, with success/fail callbacks and a "Locating you..." placeholder.
# If the build fails (e.g. geocoding the backup), writes a fallback page instead.

import argparse
import sys

import folium

from gmapkit import GoogleMap, MapsConfig, Marker
from gmapkit.pages import write_error_page, write_page
from gmapkit.services.geocoder import Geocoder

# ---------- config ----------
OUT_FILE = "docs/geolocation.html"
PAGE_TITLE = "Geolocation"
BACKUP_ADDRESS = "New York, NY"

LOADING_HTML = (
    '<div style="background:#eee;height:300px;padding:200px 0 0 0;text-align:center;">'
    "<p>Locating you...</p></div>"
)

CALLBACKS_JS = """<script type="text/javascript">
function geofail() {
  alert('geolocation failed');
}
function geosuccess() {
  alert('geolocation succeeded');
}
</script>"""


def build_map(config: MapsConfig, backup_address: str) -> GoogleMap:
    geocoder = Geocoder.from_config(config)
    backup = geocoder.geocode(backup_address)

    gmap = GoogleMap(config=config)
    gmap.enable_geolocation(5000, True)
    gmap.center_on_user(backup)
    gmap.set_size("500px", "500px").set_zoom(16)
    gmap.set_geolocation_fail_callback("geofail")
    gmap.set_geolocation_success_callback("geosuccess")
    gmap.set_loading_content(LOADING_HTML)

    Marker.from_user_location(timeout=10000, high_accuracy=True, backup=backup, title="You are here").add_to(gmap)
    return gmap


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default=None, help="JSON settings file (api_key, language, ...)")
    ap.add_argument("--backup", default=BACKUP_ADDRESS, help="address used when the browser can't locate the visitor")
    ap.add_argument("--out", default=OUT_FILE)
    args = ap.parse_args()

    try:
        config = MapsConfig.load(args.config)
        gmap = build_map(config, args.backup)
        fig = gmap.figure(title=PAGE_TITLE)
        fig.header.add_child(folium.Element(CALLBACKS_JS), name="callbacks")
        write_page(fig, args.out)
        print("Wrote", args.out)
    except Exception as e:
        print("ERROR building map:", e, file=sys.stderr)
        write_error_page(args.out, PAGE_TITLE, str(e))
        print("Wrote fallback page:", args.out)
        # keep the page live even if the build fails
        sys.exit(0)


if __name__ == "__main__":
    main()
