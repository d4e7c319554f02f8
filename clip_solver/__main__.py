from clip_solver.clipboard_monitor import main

if __name__ == "__main__":
    main()
