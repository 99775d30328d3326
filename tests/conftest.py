import sys

# Deep-tree tests create >1000 nested directories; pytest's recursive
# tmp_path cleanup (shutil.rmtree) needs a higher recursion limit.
sys.setrecursionlimit(max(sys.getrecursionlimit(), 10000))
