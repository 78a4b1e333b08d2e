from sub_pilot.cli import main

if __name__ == "__main__":
    main()
