"""
Deadline Report Runner — classifies the office's deadlines as of today and
writes the schedule back to S3.

Input:  s3://<bucket>/deadlines/deadlines.parquet
        (deadline_id, due_date, status, working_days_only, ...)
Output: s3://<bucket>/reports/deadline_schedule_<as_of>.parquet + summary JSON
"""
import json
import logging
from datetime import date
from io import BytesIO

import boto3
import pandas as pd

from lexcal.calendar.working_days import GreekLegalCalendar
from lexcal.compute.deadline_status import compute_deadline_schedule

S3_BUCKET = "lexcal-office-data"
DEADLINES_KEY = "deadlines/deadlines.parquet"
REPORT_PREFIX = "reports"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("deadline_report_runner")
s3 = boto3.client("s3")


def read_parquet_s3(key):
    logger.info("  Reading s3://%s/%s", S3_BUCKET, key)
    resp = s3.get_object(Bucket=S3_BUCKET, Key=key)
    return pd.read_parquet(BytesIO(resp["Body"].read()))


def write_parquet_s3(df, key):
    buf = BytesIO()
    df.to_parquet(buf, index=False, engine="pyarrow")
    buf.seek(0)
    s3.put_object(Bucket=S3_BUCKET, Key=key, Body=buf.getvalue())
    logger.info("  Wrote s3://%s/%s (%d rows)", S3_BUCKET, key, len(df))


def write_json_s3(data, key):
    body = json.dumps(data, indent=2, default=str)
    s3.put_object(Bucket=S3_BUCKET, Key=key, Body=body.encode("utf-8"))
    logger.info("  Wrote s3://%s/%s", S3_BUCKET, key)


def main():
    as_of = date.today()
    logger.info("=" * 70)
    logger.info("Deadline report as of %s", as_of)
    logger.info("=" * 70)

    cal = GreekLegalCalendar()
    deadlines_df = read_parquet_s3(DEADLINES_KEY)
    logger.info("  Loaded %d deadlines", len(deadlines_df))

    schedule_df = compute_deadline_schedule(deadlines_df, as_of, cal)

    # ── Validation ──
    assert len(schedule_df) == len(deadlines_df), \
        f"Row count mismatch: {len(schedule_df)} vs {len(deadlines_df)}"
    assert schedule_df["deadline_id"].is_unique, "duplicate deadline_id in input"

    status_counts = schedule_df["deadline_status"].value_counts().to_dict()
    logger.info("  Status distribution: %s", status_counts)

    overdue = schedule_df[schedule_df["is_overdue"]].sort_values("due_date")
    for row in overdue.head(10).itertuples():
        logger.warning("  OVERDUE %s due %s", row.deadline_id, row.due_date)

    # ── Save to S3 ──
    stamp = as_of.isoformat()
    write_parquet_s3(schedule_df, f"{REPORT_PREFIX}/deadline_schedule_{stamp}.parquet")
    write_json_s3(
        {
            "as_of": stamp,
            "n_deadlines": len(schedule_df),
            "status_counts": {k: int(v) for k, v in status_counts.items()},
            "next_working_day": cal.next_working_day(as_of).isoformat(),
        },
        f"{REPORT_PREFIX}/deadline_schedule_{stamp}_summary.json",
    )

    logger.info("Deadline report COMPLETE")


if __name__ == "__main__":
    main()
