from .game_client import main

main()
