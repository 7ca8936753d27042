"""
The case: the mansion layout, the clues hidden in it, and who each clue points at.

                      (Entrance Hall)
                     /               \\
            (Living Room)             (Kitchen)
             /        \\               /       \\
       (Library)     (Study)     (Pantry)    (Garden)
         /               \\                      \\
 (Master Bedroom)    (Guest Room)          (Gardener's Shed)
"""

from detective_quest.mansion import Room, create_room, link_left, link_right
from detective_quest.suspect_index import DEFAULT_CAPACITY, SuspectIndex


# Room name -> clue hidden there ("" for none)
ROOM_CLUES = {
    "Entrance Hall": "",
    "Living Room": "Muddy footprints on the rug",
    "Kitchen": "A knife missing from the block",
    "Library": "A torn page from the will",
    "Study": "Ashes of a burned letter",
    "Pantry": "A bottle of poison behind the flour",
    "Garden": "Broken pruning shears",
    "Master Bedroom": "A silver cufflink under the bed",
    "Guest Room": "",
    "Gardener's Shed": "Bloodstained gloves",
}

# (clue, suspect) associations loaded into the suspect index
CLUE_SUSPECTS = [
    ("Muddy footprints on the rug", "Gardener"),
    ("A knife missing from the block", "Cook"),
    ("A torn page from the will", "Butler"),
    ("Ashes of a burned letter", "Butler"),
    ("A bottle of poison behind the flour", "Cook"),
    ("Broken pruning shears", "Gardener"),
    ("A silver cufflink under the bed", "Butler"),
    ("Bloodstained gloves", "Gardener"),
]


def build_mansion() -> Room:
    """Wire up the mansion and return the Entrance Hall."""
    rooms = {name: create_room(name, clue) for name, clue in ROOM_CLUES.items()}

    hall = rooms["Entrance Hall"]
    living_room = link_left(hall, rooms["Living Room"])
    kitchen = link_right(hall, rooms["Kitchen"])

    library = link_left(living_room, rooms["Library"])
    study = link_right(living_room, rooms["Study"])

    link_left(kitchen, rooms["Pantry"])
    garden = link_right(kitchen, rooms["Garden"])

    link_left(library, rooms["Master Bedroom"])
    link_right(study, rooms["Guest Room"])
    link_right(garden, rooms["Gardener's Shed"])

    return hall


def build_suspect_index(capacity: int = DEFAULT_CAPACITY) -> SuspectIndex:
    return SuspectIndex.from_pairs(CLUE_SUSPECTS, capacity)
