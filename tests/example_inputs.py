"""Worked examples from the puzzle texts."""

DAY_1 = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"

DAY_2 = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,"
    "1698522-1698528,446443-446449,38593856-38593862,565635-565659,"
    "824824821-824824827,2121212118-2121212124"
)

DAY_3 = "987654321111111\n811111111111119\n234234234234278\n818181911112111\n"

DAY_4 = (
    "..@@.@@@@.\n"
    "@@@.@.@.@@\n"
    "@@@@@.@.@@\n"
    "@.@@@@..@.\n"
    "@@.@@@@.@@\n"
    ".@@@@@@@.@\n"
    ".@.@.@.@@@\n"
    "@.@@@.@@@@\n"
    ".@@@@@@@@.\n"
    "@.@.@@@.@.\n"
)

DAY_5 = "3-5\n10-14\n16-20\n12-18\n\n1\n5\n8\n11\n17\n32\n"

DAY_6 = "123 328  51 64 \n 45 64  387 23 \n  6 98  215 314\n*   +   *   +  "

EXAMPLES = {1: DAY_1, 2: DAY_2, 3: DAY_3, 4: DAY_4, 5: DAY_5, 6: DAY_6}
