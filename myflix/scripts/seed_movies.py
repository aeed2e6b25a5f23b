"""
Seed the movie catalog with the starter top-10 list. Run from project root:
  python -m myflix.scripts.seed_movies
Titles already in the database are skipped, so running it twice is harmless.
"""
import argparse
import logging
import sys

from sqlalchemy.orm import Session

from myflix.core.config import get_settings
from myflix.core.database import build_engine, build_session_factory
from myflix.core.logging import configure_logging
from myflix.models import Base, Movie

logger = logging.getLogger(__name__)

_SCIFI = {
    "name": "Science Fiction",
    "description": "Science Fiction movies are movies that focus on science and technology.",
}
_ACTION = {
    "name": "Action",
    "description": "Action movies are movies that focus on physical action.",
}
_SPIELBERG = {
    "name": "Steven Spielberg",
    "bio": (
        "Steven Spielberg is an American film director, producer, and screenwriter. "
        "He is considered one of the founding pioneers of the New Hollywood era and one of "
        "the most popular directors and producers in film history."
    ),
}

TOP_MOVIES: list[dict] = [
    {
        "title": "The Godfather",
        "description": "The aging patriarch of an organized crime dynasty transfers control of his clandestine empire to his reluctant son.",
        "year": 1972,
        "image_path": "https://upload.wikimedia.org/wikipedia/en/1/1c/Godfather_ver1.jpg",
        "director": {
            "name": "Francis Ford Coppola",
            "bio": "Francis Ford Coppola is an American film director, producer, and screenwriter. He was a central figure in the New Hollywood filmmaking movement of the 1960s and 1970s.",
        },
        "genre": {"name": "Crime", "description": "Crime movies are movies that focus on criminal activities."},
        "featured": True,
    },
    {
        "title": "Star Wars",
        "description": "A young farm boy joins a rebellion to save the galaxy from an evil empire.",
        "year": 1977,
        "image_path": "https://upload.wikimedia.org/wikipedia/en/8/87/StarWarsMoviePoster1977.jpg",
        "director": {
            "name": "George Lucas",
            "bio": "George Lucas is an American film director, producer, screenwriter, and entrepreneur, best known for creating the Star Wars and Indiana Jones franchises.",
        },
        "genre": _SCIFI,
    },
    {
        "title": "Jurassic Park",
        "description": "A theme park showcasing genetically-engineered dinosaurs turns deadly when the creatures escape.",
        "year": 1993,
        "image_path": "https://upload.wikimedia.org/wikipedia/en/e/e7/Jurassic_Park_poster.jpg",
        "director": _SPIELBERG,
        "genre": _SCIFI,
    },
    {
        "title": "The Matrix",
        "description": "A computer hacker discovers the world is a simulated reality and joins a rebellion to free humanity.",
        "year": 1999,
        "image_path": "https://upload.wikimedia.org/wikipedia/en/c/c1/The_Matrix_Poster.jpg",
        "director": {
            "name": "The Wachowskis",
            "bio": "The Wachowskis are American film directors, writers, and producers.",
        },
        "genre": _SCIFI,
    },
    {
        "title": "Iron Man",
        "description": "A wealthy inventor creates a high-tech suit of armor to fight crime as Iron Man.",
        "year": 2008,
        "image_path": "https://upload.wikimedia.org/wikipedia/en/7/70/Ironmanposter.JPG",
        "director": {"name": "Jon Favreau", "bio": "Jon Favreau is an American film director, producer, and screenwriter."},
        "genre": _ACTION,
    },
    {
        "title": "Gladiator",
        "description": "A betrayed Roman general fights for vengeance as a gladiator.",
        "year": 2000,
        "image_path": "https://upload.wikimedia.org/wikipedia/en/8/8d/Gladiator_ver1.jpg",
        "director": {"name": "Ridley Scott", "bio": "Ridley Scott is an English film director and producer."},
        "genre": _ACTION,
    },
    {
        "title": "Indiana Jones and the Last Crusade",
        "description": "An archaeologist embarks on a quest to find the Holy Grail while battling Nazis.",
        "year": 1989,
        "image_path": "https://upload.wikimedia.org/wikipedia/en/f/fc/Indiana_Jones_and_the_Last_Crusade_A.jpg",
        "director": _SPIELBERG,
        "genre": _ACTION,
    },
    {
        "title": "Avengers: Endgame",
        "description": "The Avengers assemble once more to reverse the damage caused by Thanos and save the universe.",
        "year": 2019,
        "image_path": "https://upload.wikimedia.org/wikipedia/en/0/0d/Avengers_Endgame_poster.jpg",
        "director": {
            "name": "Anthony and Joe Russo",
            "bio": "Anthony and Joe Russo are American film and television directors.",
        },
        "genre": _ACTION,
    },
    {
        "title": "Armageddon",
        "description": "A team of drillers is sent into space to prevent a giant asteroid from colliding with Earth.",
        "year": 1998,
        "image_path": "https://upload.wikimedia.org/wikipedia/en/f/fc/Armageddon-poster06.jpg",
        "director": {"name": "Michael Bay", "bio": "Michael Bay is an American film director and producer."},
        "genre": _ACTION,
    },
    {
        "title": "Assassins Creed",
        "description": "A man relives the memories of his ancestor, an Assassin, to uncover ancient secrets.",
        "year": 2016,
        "image_path": "https://upload.wikimedia.org/wikipedia/en/a/a3/Assassin%27s_Creed_film_poster.jpg",
        "director": {"name": "Justin Kurzel", "bio": "Justin Kurzel is an Australian film director."},
        "genre": _ACTION,
    },
]


def seed_movies(db: Session, movies: list[dict] | None = None) -> int:
    """Insert movies whose title is not already present. Returns the number inserted."""
    movies = TOP_MOVIES if movies is None else movies
    existing = {title for (title,) in db.query(Movie.title).all()}
    inserted = 0
    for data in movies:
        if data["title"] in existing:
            continue
        db.add(Movie(**data))
        existing.add(data["title"])
        inserted += 1
    db.commit()
    return inserted


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the myFlix movie catalog.")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables first (for SQLite dev databases without Alembic)",
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings)
    engine = build_engine(settings)
    if args.create_tables:
        Base.metadata.create_all(engine)
    db = build_session_factory(engine)()
    try:
        inserted = seed_movies(db)
        logger.info("Seed completed: movies_inserted=%s", inserted)
        return 0
    except Exception as e:
        logger.exception("Seed failed: %s", e)
        return 1
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
