# scripts/import_kjv.py
import json
import sys
from pathlib import Path
from sqlalchemy import delete, insert

from config import Config
from database import KjvStore
from models import KjvVerse

BATCH_SIZE = 1000

# Map of book names to their canonical book number
BOOKS_MAP = {
    'Genesis': 1,
    'Exodus': 2,
    'Leviticus': 3,
    'Numbers': 4,
    'Deuteronomy': 5,
    'Joshua': 6,
    'Judges': 7,
    'Ruth': 8,
    '1 Samuel': 9,
    '2 Samuel': 10,
    '1 Kings': 11,
    '2 Kings': 12,
    '1 Chronicles': 13,
    '2 Chronicles': 14,
    'Ezra': 15,
    'Nehemiah': 16,
    'Esther': 17,
    'Job': 18,
    'Psalms': 19,
    'Proverbs': 20,
    'Ecclesiastes': 21,
    'Song of Solomon': 22,
    "Solomon's Song": 22,  # Alternate name
    'Isaiah': 23,
    'Jeremiah': 24,
    'Lamentations': 25,
    'Ezekiel': 26,
    'Daniel': 27,
    'Hosea': 28,
    'Joel': 29,
    'Amos': 30,
    'Obadiah': 31,
    'Jonah': 32,
    'Micah': 33,
    'Nahum': 34,
    'Habakkuk': 35,
    'Zephaniah': 36,
    'Haggai': 37,
    'Zechariah': 38,
    'Malachi': 39,
    'Matthew': 40,
    'Mark': 41,
    'Luke': 42,
    'John': 43,
    'Acts': 44,
    'Romans': 45,
    '1 Corinthians': 46,
    '2 Corinthians': 47,
    'Galatians': 48,
    'Ephesians': 49,
    'Philippians': 50,
    'Colossians': 51,
    '1 Thessalonians': 52,
    '2 Thessalonians': 53,
    '1 Timothy': 54,
    '2 Timothy': 55,
    'Titus': 56,
    'Philemon': 57,
    'Hebrews': 58,
    'James': 59,
    '1 Peter': 60,
    '2 Peter': 61,
    '1 John': 62,
    '2 John': 63,
    '3 John': 64,
    'Jude': 65,
    'Revelation': 66,
}

def parse_reference(ref):
    """Parse a reference like 'Genesis 1:1' into (book_name, chapter, verse)"""
    book_chapter, verse = ref.rsplit(':', 1)
    book_parts = book_chapter.rsplit(' ', 1)
    chapter = book_parts[-1]
    book_name = ' '.join(book_parts[:-1])
    return book_name, int(chapter), int(verse)

def clean_verse_text(text):
    """Clean verse text by removing any leading '#' and trimming whitespace"""
    return text.lstrip('#').strip()

def import_kjv_data(json_path, database_url=None):
    """Replace the kjv table with the verses of a KJV JSON file.

    Returns ``(verse_count, skipped_refs)``.
    """
    print(f"Reading JSON file from: {json_path}")

    store = KjvStore(database_url or Config.KJV_DATABASE_URL)
    store.create_schema()

    with open(json_path, 'r', encoding='utf-8') as f:
        verses_data = json.load(f)

    verse_count = 0
    skipped_verses = []
    verses_to_insert = []

    with store.session_scope() as db:
        # Clear existing verses
        db.execute(delete(KjvVerse))
        print("Cleared existing verses from database")

        for ref, text in verses_data.items():
            try:
                book_name, chapter, verse = parse_reference(ref)
            except ValueError as e:
                print(f"Error processing reference '{ref}': {e}")
                skipped_verses.append(ref)
                continue

            if book_name not in BOOKS_MAP:
                skipped_verses.append(ref)
                print(f"Warning: Unknown book '{book_name}' in reference '{ref}'")
                continue

            verses_to_insert.append({
                'book': BOOKS_MAP[book_name],
                'chapter': chapter,
                'verse': verse,
                'text': clean_verse_text(text),
            })
            verse_count += 1
            if len(verses_to_insert) >= BATCH_SIZE:
                print(f"Processed {verse_count} verses...")
                db.execute(insert(KjvVerse), verses_to_insert)
                verses_to_insert = []

        # Insert any remaining verses
        if verses_to_insert:
            db.execute(insert(KjvVerse), verses_to_insert)
        db.commit()

    print(f"\nImport complete!")
    print(f"Processed {verse_count} verses")
    if skipped_verses:
        print(f"Skipped {len(skipped_verses)} verses due to unknown book names or bad references")
    return verse_count, skipped_verses

if __name__ == '__main__':
    if len(sys.argv) not in (2, 3):
        print("Usage: python -m scripts.import_kjv <path_to_kjv.json> [database_url]")
        sys.exit(1)

    json_path = Path(sys.argv[1])
    database_url = sys.argv[2] if len(sys.argv) == 3 else None
    import_kjv_data(json_path, database_url)
