import logging

from db import WorkoutRepository

logger = logging.getLogger(__name__)

SAMPLE_WORKOUTS = [
    ("Run", 30, "Park", "5k easy pace"),
    ("Swim", 45, "Community pool", "Intervals, 10x100m"),
    ("Yoga", 60, "Home", ""),
]


def seed(db_path: str = "workouts.db") -> int:
    """Insert sample workouts into an empty database and return how many."""
    workouts = WorkoutRepository(db_path)
    if workouts.fetch_all_workouts():
        logger.info("Database already contains workouts")
        return 0
    for exercise, duration, location, description in SAMPLE_WORKOUTS:
        workouts.create(exercise, duration, location, description)
    logger.info("Seed data inserted")
    return len(SAMPLE_WORKOUTS)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed()
