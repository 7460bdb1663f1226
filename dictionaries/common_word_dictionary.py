# ============================================================
# NAME FILTERING RULES
# ============================================================
#
# This file defines THREE word lists used during character
# name extraction.
#
# These rules are LEXICAL and DETERMINISTIC.
# Matching is always on the WHOLE candidate string, never on
# individual words inside a multi-word name.
#
# Example (CORRECT behavior):
#   ❌ "Captain"         -> removed (standalone stop word)
#   ✅ "Captain Smith"   -> kept
#   ❌ "Monday"          -> removed
#   ✅ "Monday Jones"    -> kept
#
# ------------------------------------------------------------
# 1. SENTENCE_STARTERS
# ------------------------------------------------------------
#
# The short, case-SENSITIVE stop-list of the acceptance
# predicate. Every candidate from every extractor is checked
# against it before it is counted.
#
# ------------------------------------------------------------
# 2. COMMON_WORDS
# ------------------------------------------------------------
#
# The large, case-INSENSITIVE stop-list applied once after all
# extractors have run. Covers pronouns, prepositions, days and
# months, narrative filler, and nouns common in genre fiction
# (game-lit / fantasy system messages).
#
# ------------------------------------------------------------
# 3. CRITICAL_WORDS
# ------------------------------------------------------------
#
# Lowercase pronouns and articles that are ALWAYS dropped when
# exporting first names, even if a caller passes its own list.
#
# ============================================================

SENTENCE_STARTERS = frozenset({
    "The", "A", "An", "And", "But", "Or", "For", "Nor", "So", "Yet",
    "In", "On", "At", "To", "By", "As", "Of", "From", "With", "About",
})


COMMON_WORDS = frozenset({
    # ── Days / Months ─────────────────────────────────────
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",

    # ── Common place names ────────────────────────────────
    "America", "England", "London", "Paris", "New York", "Chicago", "Boston",

    # ── Articles / Conjunctions ───────────────────────────
    "The", "I", "A", "An", "And", "But", "Or", "For", "Nor", "So", "Yet", "If",

    # ── Structural words ──────────────────────────────────
    "Chapter", "Book", "Volume", "Part", "Section", "Page", "House", "Street",

    # ── Directions ────────────────────────────────────────
    "North", "South", "East", "West",
    "Northeast", "Northwest", "Southeast", "Southwest",
    "Northern", "Eastern",

    # ── Pronouns / Possessives / Copulas ──────────────────
    "We", "You", "They", "He", "She", "It", "Me", "My", "Mine", "Your", "Yours",
    "His", "Her", "Hers", "Their", "Theirs", "Our", "Ours", "Its", "This", "That",
    "These", "Those", "Am", "Is", "Are", "Was", "Were", "Be", "Been", "Being",
    "Him", "Them", "Himself", "Itself", "Yourself", "Self",

    # ── Auxiliaries / Modals ──────────────────────────────
    "Do", "Does", "Did", "Done", "Have", "Has", "Had", "Having",
    "Can", "Cannot", "Cant", "Could", "Will", "Would", "Should", "Shall",
    "Might", "Must", "Didn", "Don",

    # ── Prepositions ──────────────────────────────────────
    "About", "Above", "Across", "After", "Against", "Along", "Among", "Around",
    "At", "Before", "Behind", "Below", "Beneath", "Beside", "Besides", "Between",
    "Beyond", "By", "Down", "During", "Except", "From", "In", "Inside", "Into",
    "Like", "Near", "Of", "Off", "On", "Out", "Outside", "Over", "Past", "Since",
    "Through", "Throughout", "To", "Toward", "Under", "Underneath", "Until", "Up",
    "Upon", "With", "Within", "Without", "Despite", "Unlike",

    # ── Question / Relative words ─────────────────────────
    "What", "When", "Where", "Why", "Who", "Whom", "Whose", "Which", "How",
    "Whatever", "Whether", "While", "Because", "Although", "Though", "However",

    # ── Adverbs ───────────────────────────────────────────
    "Very", "Really", "Quite", "Rather", "Too", "Enough", "Just", "Almost",
    "Also", "Even", "Still", "Already", "Now", "Then", "Here", "There",
    "Always", "Never", "Often", "Sometimes", "Seldom", "Usually", "Again",
    "Ever", "Once", "Soon", "Later", "Thus", "Together", "Twice", "Perhaps",
    "Maybe", "Exactly", "Finally", "Instead", "Actually", "Absolutely",
    "Apparently", "Especially", "Eventually", "Indeed", "Meanwhile", "Mostly",
    "Possibly", "Probably", "Slowly", "Somehow", "Successfully", "Suddenly",
    "Technically", "Else", "Than",

    # ── Adjectives / Quantifiers ──────────────────────────
    "Good", "Bad", "Big", "Small", "Old", "New", "High", "Low", "Long", "Short",
    "Many", "Few", "Much", "Little", "Same", "Different", "Other", "Others",
    "Another", "Such", "Next", "Last", "First", "Second", "Third", "All", "Any",
    "Each", "Every", "Some", "No", "Not", "Only", "Own", "Sure", "More", "Most",
    "Less", "Least", "Both", "Either", "Several", "Whole", "Half", "Great",
    "Best", "Better", "Basic", "Close", "Common", "Current", "Available",
    "Following", "Given", "Gone", "Right", "Left", "Wrong", "Full", "Free", "Fresh",
    "Final", "Total",
    "Fine", "Nice", "Perfect", "Simple", "Single", "Double", "Dual", "Multiple",
    "Strange", "Special", "Real", "True", "Pure", "Rare", "Epic", "Elite",
    "Extreme", "Critical", "Complex", "Dangerous", "Delicate", "Dreadful",
    "Excellent", "Exotic", "Fascinating", "Impressive", "Interesting",
    "Wonderful", "Curious", "Careful", "Confused", "Daring", "Greedy", "Nimble",
    "Smart", "Tricky", "Twisted", "Uncommon", "Unknown", "Unseen", "Notable",
    "Optional", "Official", "Permanent", "Temporary", "Primary", "Secondary",
    "Physical", "Mental", "Moderate", "Instant", "Main", "Ready", "Misty",
    "Bottomless", "Hollow", "Corrupted", "Enchanted", "Legendary", "Imperial",
    "Supreme", "Ancient", "Additional", "Assorted", "Consecutive",
    "Unintentional", "Magical", "Musical", "Harmonic", "Rhythmic", "Resonant",
    "Dissonant", "Bardic", "Arcane", "Golden",

    # ── Colours / Elements ────────────────────────────────
    "Black", "Blue", "Red", "Dark", "Light", "Cold", "Deep",
    "Air", "Earth", "Water", "Wind", "Fire", "Storm", "Thunder", "Lightning",
    "Stone", "Iron", "Steel", "Gold", "Brass", "Mithril", "Leather", "Crystal",

    # ── Numbers ───────────────────────────────────────────
    "One", "Two", "Three", "Four", "Five", "Six", "Eight", "Nine", "Ten",
    "Eighteen", "Twenty", "Hundred",

    # ── Common verbs ──────────────────────────────────────
    "Know", "Made", "Make", "Makes", "Making", "Said", "See", "Take", "Taking",
    "Tell", "Thank", "Thanks", "Think", "Turn", "Using", "Use", "Want", "Well",
    "Find", "Choose", "Coming", "Come", "Getting", "Get", "Got", "Going", "Keep",
    "Keeping", "Look", "Looks", "Looking", "Need", "Please", "Let", "Feel",
    "Heard", "Found", "Met", "Seems", "Sounds", "Show", "Shows", "Run", "Running",
    "Move", "Moves", "Moving", "Hold", "Wait", "Stop", "Stay", "Try", "Save",
    "Leave", "Listen", "Remember", "Return", "Pass", "Bring", "Begin", "Build",
    "Check", "Consider", "Create", "Creates", "Creating", "Deliver", "Discover",
    "Eat", "Establish", "Explore", "Gain", "Gained", "Gather", "Identify",
    "Increase", "Learn", "Locate", "Protect", "Provides", "Allows", "Grants",
    "Reveals", "Removes", "Reach", "Reached", "Received", "Released", "Removed",
    "Required", "Triggered", "Expired", "Failed", "Defeated", "Killed",
    "Accepted", "Acquired", "Agreed", "Completed", "Equipped", "Marked",
    "Cataloged", "Assuming", "Starting", "Standing", "Speaking", "Joining",
    "Counting", "Breaking", "Casting", "Crushing", "Maintaining", "Planning",
    "Shattering", "Slashing", "Sundering", "Throwing", "Tracking", "Whispering",
    "Understood", "Guess", "Wield", "Embrace", "Notice", "Watch", "Study",
    "Support", "Secure", "Drop", "Dodge", "Dash", "Cut", "Hit", "Fall", "Rise",
    "Sleep", "Hunt", "Cook", "Dance", "Rest", "Trust", "Fear", "Panic",

    # ── Interjections / Filler ────────────────────────────
    "Yes", "Oh", "Ah", "Hey", "Hmm", "Wow", "Aye", "Okay", "Alright", "Yeah",
    "Welcome",

    # ── Indefinite pronouns ───────────────────────────────
    "Anyone", "Anything", "Everyone", "Everything", "Nobody", "None", "Nothing",
    "Someone", "Something", "Somewhere", "Thing", "Things",

    # ── Narrative nouns ───────────────────────────────────
    "Away", "Back", "Day", "Dawn", "Evening", "Morning", "Night", "Hours",
    "Time", "Today", "Tomorrow", "Name", "News", "Note", "Notes", "People",
    "Party", "Group", "Business", "Trouble", "Truth", "Word", "World", "Life",
    "Mind", "Memories", "Dignity", "Relief", "Silence", "Sense", "Side", "Edge",
    "Line", "Point", "Points", "Road", "Farm", "Farmstead", "Kitchen", "Inn",
    "Market", "Woods", "Mountain", "Mountains", "Rivers", "Riverbed", "Cove",
    "Vale", "Haven", "Heaven", "Diary", "Document", "Documents", "Summary",
    "Description", "Report", "Research", "Test", "Title", "Titles", "Type",
    "Update", "Usage", "Value", "Warning", "Dad", "Mom",

    # ── Ranks / Roles (standalone only) ───────────────────
    "Captain", "Commander", "Corporal", "General", "Lieutenant", "Sergeant",
    "Officer", "Officers", "Count", "King", "Lady", "Master", "Mister", "Mrs",
    "Sir", "Leader", "Chieftain", "Guildmaster", "Armsmaster", "Spymaster",
    "Stablemaster", "Medic", "Merchant", "Rancher", "Scout", "Shaman", "Mage",
    "Bard", "Bards", "Archers", "Adventurer", "Adventurers", "Guard", "Guards",
    "Guardian", "Defender", "Hunter", "Hunters", "Raider", "Raiders", "Seeker",
    "Survivor", "Walker", "Wanderer", "Warrior", "Warriors", "Weaver", "Giver",
    "Maker", "Makers", "Wayfinder", "Virtuoso", "Novice", "Beginner",
    "Specialist", "Translator", "Sovereign", "Outworlder", "Onlookers", "Guest",
    "Council", "Brigade", "Garrison", "Guild", "Caravan", "Forces",

    # ── Creatures ─────────────────────────────────────────
    "Bear", "Beast", "Birds", "Dragon", "Goblin", "Hare", "Kobold", "Rat",
    "Ratman", "Ratmen", "Serpent", "Wolf", "Species", "Human", "Gods", "Enemy",
    "Enemies",

    # ── Game / System vocabulary ──────────────────────────
    "Abilities", "Ability", "Access", "Achievements", "Analysis", "Arbor",
    "Arcana", "Area", "Armour", "Arts", "Assessment", "Attack", "Badge", "Base",
    "Battle", "Blade", "Blades", "Blood", "Bound", "Bracer", "Burden",
    "Cartography", "Chaos", "Character", "Charisma", "Charm", "Chord", "Circlet",
    "Class", "Classification", "Clean", "Clearance", "Clothing", "Collection",
    "Combat", "Command", "Compass", "Complete", "Completion", "Conditions",
    "Constitution", "Construction", "Cooldown", "Core", "Cost", "Cross",
    "Currency", "Daggers", "Damage", "Decoder", "Defeat", "Defence", "Delivery",
    "Detection", "Difficulty", "Dirge", "Dissolution", "Drift", "Duration",
    "Effect", "Effects", "Energy", "Enhancement", "Evasion", "Experience",
    "Failure", "Fang", "Feast", "Finesse", "Flag", "Flow", "Focus", "Food",
    "Footwork", "Form", "Fundamentals", "Gathering", "Harmony", "Healing",
    "Instrument", "Intelligence", "Inventory", "Items", "Jab", "Kandari",
    "Knowledge", "Law", "Learning", "Lessons", "Level", "Limit", "Limitations",
    "Location", "Lock", "Lockpicking", "Loot", "Losses", "Lullaby", "Magic",
    "Mana", "Map", "Material", "Meat", "Movement", "Music", "Necklace",
    "Objective", "Objectives", "Passive", "Pattern", "Pelt", "Pendant",
    "Pendulum", "Percussion", "Phase", "Plate", "Plus", "Poison", "Portal",
    "Pot", "Potion", "Potions", "Power", "Practice", "Profession", "Progress",
    "Property", "Quality", "Quest", "Quests", "Quick", "Range", "Rate",
    "Rations", "Recognition", "Reconnaissance", "Recovery", "Remaining",
    "Requirement", "Requirements", "Requirments", "Resistance", "Resistances",
    "Resonance", "Results", "Rewards", "Rhythm", "Ring", "Riposte",
    "Riverhaven", "Round", "Satchel", "Scale", "Scales", "Security",
    "Shortsword", "Sidestep", "Sidesteps", "Skill", "Skilled", "Skills",
    "Song", "Songs", "Speech", "Speed", "Staff", "Stars", "Statistics",
    "Status", "Strain", "Strength", "Strike", "Strikes", "String", "Success",
    "Sunlight", "Supply", "Sweat", "Sword", "System", "Target", "Terrain",
    "Touch", "Track", "Tracks", "Trade", "Training", "Translation", "Trap",
    "Traps", "Tumblers", "Tune", "Understanding", "Various", "Vial", "Victory",
    "Void", "Waistband", "War", "Warren", "Wave", "Weight", "Wellspring",
    "Whisker", "Whisper", "Whispers", "Wing", "Wisdom",
})


CRITICAL_WORDS = frozenset({
    "we", "you", "they", "he", "she", "it", "i", "me", "my", "mine", "your", "yours",
    "his", "her", "hers", "their", "theirs", "our", "ours", "its", "the", "a", "an",
    "this", "that", "these", "those", "am", "is", "are", "was", "were", "be", "been",
    "being", "and", "but", "or", "if", "then", "when", "what", "where", "why", "how",
})
