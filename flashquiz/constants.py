"""
Operator-facing prompts and messages.

Every line the interpreter prints is defined here so the console protocol
lives in one place. Templates use str.format placeholders.
"""

# Prompts
PROMPT_ACTION = (
    "Input the action (add, remove, import, export, ask, exit, log, "
    "hardest_card, reset_stats)"
)
PROMPT_TERM = "The card:"
PROMPT_DEFINITION = "The definition of the card:"
PROMPT_REMOVE = "Which card?"
PROMPT_FILE_NAME = "File name:"
PROMPT_ASK_COUNT = "How many times to ask?"
PROMPT_QUESTION = 'Print the definition of "{term}":'

# add / remove
MSG_TERM_EXISTS = 'The card "{term}" already exists.'
MSG_DEFINITION_EXISTS = 'The definition "{definition}" already exists.'
MSG_CARD_ADDED = 'The pair ("{term}":"{definition}") has been added.'
MSG_CARD_MISSING = 'Can\'t remove "{term}": there is no such card.'
MSG_CARD_REMOVED = "The card has been removed."

# Persistence
MSG_FILE_NOT_FOUND = "File not found."
MSG_CARDS_SAVED = "{count} cards have been saved."
MSG_CARDS_LOADED = "{count} cards have been loaded."
MSG_LOG_SAVED = "The log has been saved."

# Quiz
MSG_CORRECT = "Correct!"
MSG_WRONG = 'Wrong. The right answer is "{definition}".'
MSG_WRONG_OTHER_CARD = (
    'Wrong. The right answer is "{definition}", '
    'but your definition is correct for "{other_term}".'
)
MSG_NO_CARDS_TO_ASK = "There are no cards to ask about."

# Statistics
MSG_NO_ERRORS = "There are no cards with errors."
MSG_HARDEST_CARD = (
    'The hardest card is "{term}". You have {errors} errors answering it'
)
MSG_HARDEST_CARDS = (
    "The hardest cards are {terms}. You have {errors} errors answering them"
)
MSG_STATS_RESET = "Card statistics have been reset."

# Loop control
MSG_UNKNOWN_ACTION = "Action not recognized. Please try again."
MSG_BYE = "Bye bye!"

# Number of lines a single card occupies in a card file.
LINES_PER_CARD = 3
