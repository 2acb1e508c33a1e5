"""
Holiday Calendar Runner — exports Greek legal holidays and monthly working-day
counts for a span of years to S3 (parquet + JSON summary).
"""
import json
import logging
from io import BytesIO

import boto3
import pandas as pd

from lexcal.calendar.easter import orthodox_easter
from lexcal.calendar.greek_holidays import legal_holidays
from lexcal.calendar.working_days import GreekLegalCalendar

S3_BUCKET = "lexcal-office-data"
S3_PREFIX = "calendar"
FIRST_YEAR = 2020
LAST_YEAR = 2035

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("holiday_calendar_runner")
s3 = boto3.client("s3")


def write_parquet_s3(df, key):
    buf = BytesIO()
    df.to_parquet(buf, index=False, engine="pyarrow")
    buf.seek(0)
    s3.put_object(Bucket=S3_BUCKET, Key=key, Body=buf.getvalue())
    logger.info("  Wrote s3://%s/%s (%d rows)", S3_BUCKET, key, len(df))


def write_json_s3(data, key):
    body = json.dumps(data, indent=2, default=str, ensure_ascii=False)
    s3.put_object(Bucket=S3_BUCKET, Key=key, Body=body.encode("utf-8"))
    logger.info("  Wrote s3://%s/%s", S3_BUCKET, key)


def build_holiday_table(first_year, last_year):
    rows = []
    for year in range(first_year, last_year + 1):
        for h in legal_holidays(year):
            rows.append({
                "year": year,
                "date": h.date,
                "name": h.name,
                "kind": h.kind.value,
                "weekday": h.date.weekday(),
            })
    return pd.DataFrame(rows)


def build_working_days_table(cal, first_year, last_year):
    rows = []
    for year in range(first_year, last_year + 1):
        for month in range(1, 13):
            rows.append({
                "year": year,
                "month": month,
                "working_days": cal.working_days_in_month(year, month),
            })
    return pd.DataFrame(rows)


def main():
    logger.info("=" * 70)
    logger.info("Greek legal holiday calendar export %d-%d", FIRST_YEAR, LAST_YEAR)
    logger.info("=" * 70)

    cal = GreekLegalCalendar()
    n_years = LAST_YEAR - FIRST_YEAR + 1

    holidays_df = build_holiday_table(FIRST_YEAR, LAST_YEAR)
    working_df = build_working_days_table(cal, FIRST_YEAR, LAST_YEAR)

    # ── Validation ──
    logger.info("Running validation checks...")
    assert len(holidays_df) == 13 * n_years, \
        f"Expected {13 * n_years} holidays, got {len(holidays_df)}"
    per_year = holidays_df.groupby("year").size()
    assert (per_year == 13).all(), f"Holiday count per year off: {per_year.to_dict()}"
    assert len(working_df) == 12 * n_years
    assert working_df["working_days"].between(0, 23).all(), "working_days out of range"
    for year in range(FIRST_YEAR, LAST_YEAR + 1):
        assert orthodox_easter(year).weekday() == 6, f"Easter {year} is not a Sunday"

    # Holidays that fall on a weekend do not cost a working day
    n_weekday = int((holidays_df["weekday"] < 5).sum())
    logger.info("  %d holidays, %d on weekdays", len(holidays_df), n_weekday)
    logger.info("  ✓ All validation checks passed")

    # ── Save to S3 ──
    span = f"{FIRST_YEAR}_{LAST_YEAR}"
    write_parquet_s3(holidays_df, f"{S3_PREFIX}/greek_legal_holidays_{span}.parquet")
    write_parquet_s3(working_df, f"{S3_PREFIX}/working_days_per_month_{span}.parquet")

    summary = {
        "first_year": FIRST_YEAR,
        "last_year": LAST_YEAR,
        "n_holidays": len(holidays_df),
        "n_weekday_holidays": n_weekday,
        "easter": {
            str(year): orthodox_easter(year).isoformat()
            for year in range(FIRST_YEAR, LAST_YEAR + 1)
        },
        "working_days_per_year": {
            str(year): int(total)
            for year, total in working_df.groupby("year")["working_days"].sum().items()
        },
    }
    write_json_s3(summary, f"{S3_PREFIX}/greek_legal_holidays_{span}_summary.json")

    logger.info("=" * 70)
    logger.info("Holiday calendar export COMPLETE")
    logger.info("Output: s3://%s/%s/", S3_BUCKET, S3_PREFIX)


if __name__ == "__main__":
    main()
