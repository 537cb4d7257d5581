# tests/samples.py
SCENARIO_A = (
    "Tags: romance, fantasy\n"
    "Title: Test\n"
    "Genre: Romance\n"
    "Blurb: abc\n"
    "\n"
    "Chapter 1: A\n"
    "Hello\n"
    "\n"
    "Chapter 2: B\n"
    "World"
)

GOOD_CONTENT = (
    "Tags: Romance, High School\n"
    "      slow burn\n"
    "Title: Summer Rain\n"
    "Genre: Romance\n"
    "Blurb: Two rivals share one umbrella.\n"
    "       Neither will let go first.\n"
    "\n"
    "Chapter 1: The Storm\n"
    "It started raining at noon.\r\n"
    "\r\n"
    "\r\n"
    "\r\n"
    "She had no umbrella.   \n"
    "\n"
    "Chapter 2：The Umbrella\n"
    "He offered half of his, grudgingly.\n"
)


def write_folder(root, name: str, files: dict):
    folder = root / name
    folder.mkdir(parents=True)
    for fname, body in files.items():
        p = folder / fname
        if isinstance(body, bytes):
            p.write_bytes(body)
        else:
            p.write_text(body, "utf-8")
    return folder
