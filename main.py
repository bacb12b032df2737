# main.py

# Launcher for running from a source checkout: `python main.py gui` or
# `python main.py cli --help`. The installed console script is `zfinder`.
from zfinder.main import main

if __name__ == '__main__':
    main()
