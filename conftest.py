# Puts the project root on sys.path so tests import qsortlib and median
# from the working tree.
