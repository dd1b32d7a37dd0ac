from aoc24 import main

main()
