"""
zip_locations 참조 데이터 적재 스크립트.

CSV 형식 (헤더 필수): zip_code,lat,lng

    python -m eventure.load_zip_locations data/zip_locations.csv

zip_code는 5자리로 앞을 0으로 채움 (엑셀 등에서 "02903" → "2903"으로 저장된 경우 대비).
"""

import argparse
import csv
import logging
from pathlib import Path
from typing import Iterator, TextIO, Tuple

from eventure.config import LOG_FILE, LOG_LEVEL
from eventure.database import SessionLocal
from eventure.logging_config import setup_logging
from eventure.services.zip_index import upsert_zip_locations

logger = logging.getLogger(__name__)


def read_zip_rows(fp: TextIO) -> Iterator[Tuple[str, float, float]]:
    """CSV → (zip_code, lat, lng). 형식이 잘못된 행은 경고 후 건너뜀."""
    for line_no, row in enumerate(csv.DictReader(fp), start=2):
        try:
            zip_code = row["zip_code"].strip().zfill(5)
            lat, lng = float(row["lat"]), float(row["lng"])
        except (KeyError, AttributeError, ValueError):
            logger.warning("Skipping malformed row %d: %r", line_no, row)
            continue
        if len(zip_code) != 5 or not zip_code.isdigit():
            logger.warning("Skipping row %d with invalid zip %r", line_no, zip_code)
            continue
        yield zip_code, lat, lng


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Load zip code reference coordinates")
    parser.add_argument("csv_path", type=Path, help="CSV file with zip_code,lat,lng columns")
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL, LOG_FILE)

    db = SessionLocal()
    try:
        with args.csv_path.open(newline="", encoding="utf-8") as fp:
            count = upsert_zip_locations(db, read_zip_rows(fp))
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

    print(f"Loaded {count} zip locations from {args.csv_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
