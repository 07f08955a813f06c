import pytest

from gmapkit.errors import GeocodeError
from gmapkit.geometry import LatLng
from gmapkit.overlays import InfoWindow, Marker, MarkerIcon, MarkerShape
from gmapkit.services.geocoder import GeocodeResult


def test_basic_marker_js():
    m = Marker((1, 2), title="Hi")
    assert m.get_name().startswith("marker_")
    assert m.render_js("map_x") == (
        f"{m.get_name()} = new google.maps.Marker("
        '{position: new google.maps.LatLng(1.0, 2.0), map: map_x, title: "Hi"});'
    )


def test_names_are_unique():
    assert Marker((0, 0)).get_name() != Marker((0, 0)).get_name()


def test_marker_options():
    icon = MarkerIcon("https://example.com/pin.png", width=20, height=30)
    m = Marker(
        (1, 2), icon=icon, shape=MarkerShape.circle(10, 10, 8), label="A", animation="BOUNCE",
        draggable=True, clickable=False, opacity=0.5, z_index=3, visible=False,
    )
    js = m.render_js("map_x")
    assert "icon: {url: \"https://example.com/pin.png\"" in js
    assert 'shape: {type: "circle", coords: [10, 10, 8]}' in js
    assert 'label: "A"' in js
    assert "animation: google.maps.Animation.BOUNCE" in js
    assert "draggable: true" in js
    assert "clickable: false" in js
    assert "opacity: 0.5" in js
    assert "zIndex: 3" in js
    assert "visible: false" in js


def test_icon_may_be_a_plain_url():
    m = Marker((1, 2)).set_icon("https://example.com/pin.png")
    assert 'icon: "https://example.com/pin.png"' in m.render_js("map_x")


def test_bad_icon_and_animation_rejected():
    with pytest.raises(TypeError):
        Marker((1, 2)).set_icon(42)
    with pytest.raises(ValueError):
        Marker((1, 2)).set_animation("wobble")


def test_content_opens_own_info_window():
    m = Marker((1, 2), content="<b>Hello</b>")
    iw = m.info_window.get_name()
    assert m.declarations() == [m.get_name(), iw]

    js = m.render_js("map_x")
    assert f'{iw} = new google.maps.InfoWindow({{content: "\\u003cb\\u003eHello\\u003c/b\\u003e"}});' in js
    assert f'{m.get_name()}.addListener("click", function () {{ {iw}.open({{anchor: {m.get_name()}, map: map_x}}); }});' in js


def test_content_with_shared_info_window():
    m = Marker((1, 2), content="Hello")
    js = m.render_js("map_x", shared_info_window="shared_iw")
    assert 'shared_iw.setContent("Hello");' in js
    assert "new google.maps.InfoWindow" not in js


def test_set_content_updates_existing_window():
    m = Marker((1, 2), content="one")
    first = m.info_window
    m.set_content("two")
    assert m.info_window is first
    assert first.content == "two"


def test_bounds_points():
    assert Marker((1, 2)).bounds_points() == [LatLng(1, 2)]
    assert Marker.from_user_location().bounds_points() == []


def test_from_location_geocodes_immediately(fake_geocoder):
    m = Marker.from_location("New York, NY", geocoder=fake_geocoder, title="NYC")
    assert fake_geocoder.queries == ["New York, NY"]
    assert m.position == LatLng(40.7128, -74.006)
    assert m.title == "NYC"


def test_from_location_propagates_geocode_errors():
    class Failing:
        def geocode(self, address, bounds=None):
            raise GeocodeError("ZERO_RESULTS", address)

    with pytest.raises(GeocodeError):
        Marker.from_location("nowhere", geocoder=Failing())


def test_from_user_location_js():
    m = Marker.from_user_location(timeout=10000, high_accuracy=True, backup=(40.0, -74.0))
    name = m.get_name()
    js = m.render_js("map_x")
    assert "position:" not in js
    assert "navigator.geolocation.getCurrentPosition" in js
    assert f"{name}.setPosition(user_position);" in js
    assert f"{name}.setPosition(new google.maps.LatLng(40.0, -74.0));" in js
    assert "{enableHighAccuracy: true, timeout: 10000}" in js


def test_marker_listener():
    m = Marker((1, 2)).add_listener("click", "showDetails")
    m.add_listener("dragend", "function (e) { save(e); }", once=True)
    js = m.render_js("map_x")
    assert f'google.maps.event.addListener({m.get_name()}, "click", showDetails);' in js
    assert f'google.maps.event.addListenerOnce({m.get_name()}, "dragend", function (e) {{ save(e); }});' in js


def test_marker_shape_validation():
    assert MarkerShape.rect(0, 0, 10, 20).to_js() == '{type: "rect", coords: [0, 0, 10, 20]}'
    assert MarkerShape.poly([(0, 0), (10, 0), (5, 8)]).coords == [0, 0, 10, 0, 5, 8]
    with pytest.raises(ValueError):
        MarkerShape("oval", [1, 2, 3])
    with pytest.raises(ValueError):
        MarkerShape("circle", [1, 2])
    with pytest.raises(ValueError):
        MarkerShape("poly", [0, 0, 1, 1, 2])


def test_standalone_info_window():
    iw = InfoWindow("Hi", max_width=200, pixel_offset=(0, -10), position=(1, 2), open_on_load=True)
    js = iw.render_js("map_x")
    assert (
        '{content: "Hi", maxWidth: 200, pixelOffset: new google.maps.Size(0, -10), '
        "position: new google.maps.LatLng(1.0, 2.0)}"
    ) in js
    assert f"{iw.get_name()}.open({{map: map_x}});" in js
    assert iw.bounds_points() == [LatLng(1, 2)]
    assert InfoWindow("Hi", position=(1, 2)).bounds_points() == []


def test_user_location_backup_from_geocode_result():
    m = Marker.from_user_location(backup=GeocodeResult(location=LatLng(40.7, -74.0)))
    assert m.geolocation["backup"] == LatLng(40.7, -74.0)
    assert f"{m.get_name()}.setPosition(new google.maps.LatLng(40.7, -74.0));" in m.render_js("map_x")


def test_user_location_backup_address_is_geocoded(fake_geocoder):
    m = Marker.from_user_location(backup="New York, NY", geocoder=fake_geocoder)
    assert fake_geocoder.queries == ["New York, NY"]
    assert m.geolocation["backup"] == LatLng(40.7128, -74.006)


def test_user_location_backup_coordinate_string_skips_geocoding(fake_geocoder):
    m = Marker.from_user_location(backup="12.5,-3", geocoder=fake_geocoder)
    assert fake_geocoder.queries == []
    assert m.geolocation["backup"] == LatLng(12.5, -3)
