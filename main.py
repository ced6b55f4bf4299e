# main.py

# The project-root launcher simply hands control to the package's click group,
# so `python main.py gui` and `python -m passive_view.main gui` behave the same.
from passive_view.main import main

if __name__ == '__main__':
    main()
