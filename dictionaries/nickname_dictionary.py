# ============================================================
# NICKNAME MAP
# ============================================================
#
# Informal first name -> canonical first name.
#
# Used ONLY by the name variant combiner. A nickname entry is
# merged into the first remaining name whose first word equals
# the canonical form ("Bob" -> "Robert Smith").
#
# A word missing from this map is an independent name, never
# an error.
#
# ============================================================

from types import MappingProxyType

NICKNAMES = MappingProxyType({
    # ── Robert / William / James ──────────────────────────
    "Bob": "Robert", "Rob": "Robert", "Bobby": "Robert",
    "Bill": "William", "Will": "William", "Billy": "William",
    "Jim": "James", "Jimmy": "James",

    # ── Thomas / Michael / David / Joseph ─────────────────
    "Tom": "Thomas", "Tommy": "Thomas",
    "Mike": "Michael", "Mikey": "Michael",
    "Dave": "David", "Davey": "David",
    "Joe": "Joseph", "Joey": "Joseph",

    # ── Katherine / Elizabeth / Margaret ──────────────────
    "Kate": "Katherine", "Katie": "Katherine", "Kathy": "Katherine",
    "Beth": "Elizabeth", "Liz": "Elizabeth", "Lizzy": "Elizabeth", "Eliza": "Elizabeth",
    "Maggie": "Margaret", "Peggy": "Margaret", "Meg": "Margaret",

    # ── Other common forms ────────────────────────────────
    "Chris": "Christopher",
    "Alex": "Alexander",
    "Al": "Albert",
    "Dan": "Daniel", "Danny": "Daniel",
    "Nate": "Nathan",
    "Nat": "Nathaniel",
    "Sam": "Samuel", "Sammy": "Samuel",
    "Tony": "Anthony",
    "Dick": "Richard", "Rick": "Richard", "Ricky": "Richard", "Rich": "Richard",
    "Gabe": "Gabriel",
    "Gus": "Augustus",
    "Vicky": "Victoria",
    "Vic": "Victor",
    "Ollie": "Oliver",
    "Ed": "Edward", "Eddie": "Edward",
    "Ted": "Theodore", "Teddy": "Theodore", "Theo": "Theodore",
    "Jon": "Jonathan", "Jonny": "Jonathan",
    "Jack": "John", "Johnny": "John",
    "Matt": "Matthew", "Matty": "Matthew",
    "Nick": "Nicholas",
    "Pat": "Patrick",
    "Patty": "Patricia",
    "Pam": "Pamela",
    "Ray": "Raymond",
    "Ron": "Ronald", "Ronnie": "Ronald",
    "Steph": "Stephanie",
    "Steve": "Stephen", "Stevie": "Stephen",
    "Sue": "Susan", "Susie": "Susan", "Suzy": "Susan",
    "Zach": "Zachary", "Zack": "Zachary",
})
