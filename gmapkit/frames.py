# gmapkit/frames.py
# Markers from tabular point data: CSV files or URLs, or DataFrames already in hand.

import pandas as pd

from .overlays.marker import Marker


def load_points(source, lat: str = "lat", lng: str = "lng", usecols=None) -> pd.DataFrame:
    """Read a CSV and keep the rows with usable coordinates."""
    df = pd.read_csv(source, usecols=usecols)
    missing = {lat, lng} - set(df.columns)
    if missing:
        raise ValueError(f"Missing coordinate columns: {', '.join(sorted(missing))}")
    df[lat] = pd.to_numeric(df[lat], errors="coerce")
    df[lng] = pd.to_numeric(df[lng], errors="coerce")
    df = df.dropna(subset=[lat, lng])
    df = df[df[lat].between(-90, 90) & df[lng].between(-180, 180)]
    return df.reset_index(drop=True)


def _cell(row, column):
    # a column name or a callable taking the row
    if column is None:
        return None
    if callable(column):
        return column(row)
    value = row[column]
    return None if pd.isna(value) else str(value)


def markers_from_frame(df: pd.DataFrame, lat: str = "lat", lng: str = "lng", title=None, content=None,
                       icon=None, **options) -> list[Marker]:
    markers = []
    for _, r in df.iterrows():
        markers.append(Marker(
            (float(r[lat]), float(r[lng])),
            title=_cell(r, title),
            content=_cell(r, content),
            icon=icon,
            **options,
        ))
    return markers


def add_frame(gmap, df: pd.DataFrame, **kwargs) -> list[Marker]:
    markers = markers_from_frame(df, **kwargs)
    gmap.add_objects(markers)
    return markers
