#------------------------------------------------------------
#                           art.py
#        Opaque ASCII-art assets placed by the composer.

# Leading newline and trailing indentation are part of the figure.
HEADER_FIGURE = """
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⣠⣤⣄⡀⠀⠀⠀⣀⣠⣀⠀⠀⠀⠀⠀⠀⠀
⠀⠀⠀⠀⠀⢀⣄⣀⣀⣀⠀⠀⠀⠀⠀⠀⣀⣠⣾⠏⠉⠙⢿⣶⡾⠟⠛⠉⠻⣷⠀⠀⠀⠀⠀⠀
⠀⠀⠀⠀⢰⣿⠋⠉⠙⠛⠿⣶⣶⠿⠿⠟⢻⣿⠃⠀⢠⣴⣤⣿⣧⣄⡀⣀⣀⣿⡆⠀⠀⠀⠀⠀
⠀⠀⠀⠀⣿⡏⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢸⣏⠀⠀⢻⣧⡿⠋⠉⠉⢿⣟⠉⠙⠻⣧⠀⠀⠀⠀
⠀⠀⠀⠀⢻⣧⣀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠈⢿⣦⣤⣤⣿⣷⡀⠀⢀⣾⣿⡧⠀⢀⣿⠀⠀⠀⠀
⠀⠀⠀⠀⢘⣿⠏⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠉⠛⠿⣿⡛⠉⠁⣠⣿⡇⠀⠀⠀⠀
⠀⠀⠀⠀⣾⡏⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠈⠛⠿⠟⠋⠘⣿⠀⠀⠀⠀
⠀⠀⠀⢠⣿⠄⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠠⠀⠀⠀⠀⣤⡶⣿⡷⠶⠶⠆
⠀⣀⣠⣼⣿⣤⣤⠀⠀⠀⣠⣦⡀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⣾⣿⡄⠀⠀⠀⣀⣿⣇⡀⠀⠀
⠈⠉⠉⣴⠟⠻⣷⡄⠀⢰⣿⡿⠃⠀⠀⠀⠀⣴⣷⣤⠀⠀⠀⠀⠙⠻⠗⠀⠀⠀⢩⣿⠉⠉⠉⠀
⢀⣤⣶⣿⡄⠀⠸⣷⣀⣀⡀⠀⠀⠀⠀⠀⠀⠿⠶⠟⠀⠀⠀⠀⠀⠀⠀⠀⠀⣻⣿⣷⣤⣀⠀⠀
⢺⡇⠀⠈⠑⠀⠀⠉⠉⠙⠻⣷⡄⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⣀⣤⣾⠟⠁⠀⠈⠉⠀⠀
⠈⠻⢷⣦⡀⠀⣠⡶⠾⠆⠀⠘⣿⣤⣤⣤⣤⣤⣤⣤⣤⣤⣴⣶⢶⣿⡿⣭⡀⠀⠀⠀⠀⠀⠀⠀
⠀⠀⠀⢹⣇⠀⢿⣧⣠⣾⠇⢠⣿⠃⠉⢿⣍⣉⣉⣩⡟⠁⠸⣧⣼⡟⣁⣼⠇⠀⠀⠀⠀⠀⠀⠀
⠀⠀⠀⠈⢿⣦⣄⣉⣉⣠⣴⣿⣏⠀⠀⠀⠈⠉⠉⠁⠀⠀⠀⣹⡟⠛⠋⠀⠀⠀⠀⠀⠀⠀⠀⠀
⠀⠀⠀⠀⠀⠈⠙⠛⠛⠛⠉⠀⠹⣷⠦⣤⣀⣀⣀⣀⣤⡴⣺⠟⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠈⠳⢤⣈⡽⢿⣅⣤⠾⠃⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀
    """

SMALL_ART_LINES = (
    "⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢀⣀⣀⣀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀",
    "⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢇⠀⠃⣈⠇⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀",
    "⠀⠀⠀⠀⠀⠀⠀⣤⣤⣤⣄⣀⡀⠙⠞⠁⠀⠀⠀⣀⣀⣀⣀⠀⠀⠀⠀⠀",
    "⠀⠀⠀⠀⠀⠀⢰⡏⢻⣫⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⢿⠟⣿⠀⠀⠀⠀⠀",
    "⠀⠀⠀⠀⡐⡄⣸⣰⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣿⣷⣄⣿⠀⠀⠀⠀⠀",
    "⠀⠀⣀⠠⢝⡜⣿⣿⡟⢉⣭⡝⢿⣿⣿⣿⡟⣭⣭⠉⢻⣿⡿⡠⠒⠀⠀⠀",
    "⡴⣟⣿⣻⣆⢰⣿⣿⠀⢸⣿⣿⢸⣿⣿⣿⠙⣿⣿⠇⠈⣿⣿⠱⠭⠄⠀⠀",
    "⢷⣿⡀⣸⣿⡞⣿⣿⣄⠀⠉⠁⣼⣿⢿⣿⣧⠈⠁⠀⣰⣿⣿⣠⣴⣶⣦⣄",
    "⠈⠉⠉⠉⠉⠉⠉⠉⠉⠉⠉⠉⠙⠒⠓⠒⠛⠛⠛⠛⠛⠛⠓⠻⡏⣿⣿⠿",
)
