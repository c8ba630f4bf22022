"""Cadence Quick Start Example."""

import time
from datetime import datetime

from cadence import MalformedScheduleError, RoutineScheduler, SchedulerSettings


def send_weekly_report():
    """Example job function - weekly report."""
    print(f"[{datetime.now()}] Sending weekly report...")


def sync_inbox():
    """Example job function - inbox sync."""
    print(f"[{datetime.now()}] Syncing inbox...")


def main():
    """Main function to demonstrate Cadence usage."""
    print("=== Cadence Quick Start ===\n")

    # 1. Create scheduler. Bodies only run when AGENT_ENVIRONMENT=production;
    #    otherwise each due job is logged as skipped.
    settings = SchedulerSettings.from_env(polling_interval_seconds=5)
    print(f"Environment: {settings.environment} (bodies run: {settings.is_production_like()})\n")
    scheduler = RoutineScheduler(settings)

    # 2. Register jobs
    scheduler.register_job("weekly-report", "0 9 * * 1", send_weekly_report)
    scheduler.register_job("sync-inbox", "* * * * *", sync_inbox)

    # 3. A malformed schedule is rejected at registration
    try:
        scheduler.register_job("broken", "0 9 * *")
    except MalformedScheduleError as e:
        print(f"   ✗ {e}")

    # 4. Records loaded from a database; bad rows are logged and skipped
    scheduler.register_jobs(
        [
            {"name": "nightly-cleanup", "cronExpression": "0 2 * * *", "enabled": False},
            {"name": "bad-row", "cronExpression": "0 2 * * * *"},
        ]
    )

    for job in scheduler.list_jobs():
        print(f"   • {job.name}: '{job.cron_expression}' next={job.next_run_time(datetime.now().astimezone())}")

    # 5. Run for a couple of minutes
    print("\nStarting scheduler (Ctrl+C to stop)...")
    scheduler.start()
    try:
        time.sleep(130)
    except KeyboardInterrupt:
        pass
    finally:
        scheduler.stop()
        print("Scheduler stopped")


if __name__ == "__main__":
    main()
