import io

from eventure.load_zip_locations import read_zip_rows
from eventure.services.zip_index import resolve_zip, upsert_zip_locations


def test_read_zip_rows_pads_and_skips_bad_rows():
    fp = io.StringIO(
        "zip_code,lat,lng\n"
        "2903,41.8240,-71.4128\n"
        "10001,40.7506,-73.9972\n"
        "abcde,1,2\n"
        "02108,not-a-number,-71.0\n"
    )

    rows = list(read_zip_rows(fp))

    assert rows == [("02903", 41.8240, -71.4128), ("10001", 40.7506, -73.9972)]


def test_upsert_updates_existing_zip(db):
    upsert_zip_locations(db, [("02903", 41.0, -71.0)])
    db.commit()
    count = upsert_zip_locations(db, [("02903", 41.8240, -71.4128), ("10001", 40.7506, -73.9972)])
    db.commit()

    assert count == 2
    assert resolve_zip(db, "02903") == (41.8240, -71.4128)
    assert resolve_zip(db, "10001") == (40.7506, -73.9972)


def test_resolve_unknown_zip(db):
    assert resolve_zip(db, "99999") is None
