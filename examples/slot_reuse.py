"""Show that reusing a freed slot does not change iteration order."""

from linkedmap import LinkedMap


def main() -> None:
    letters = LinkedMap[int, str]()
    for code in range(65, 70):
        letters.insert(code, chr(code))
    print(f"Start:            {list(letters.iterate())}")

    # 85 takes over the slot 67 used, but still iterates last
    letters.remove(67)
    letters.insert(85, "U")
    print(f"Remove 67, add 85: {list(letters.iterate())}")

    letters.insert(66, "Q")
    print(f"Update 66:        {list(letters.iterate())}")

    letters.remove(66)
    letters.insert(66, "Q")
    print(f"Re-insert 66:     {list(letters.iterate())}")


if __name__ == "__main__":
    main()
