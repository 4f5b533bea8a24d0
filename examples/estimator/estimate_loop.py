if __name__ == "__main__":
    import time

    from elapsedtime import Estimator
    from elapsedtime.tracker import TrackCallbackFactory, Tracker

    units_of_work = 4

    # plain estimator, printing the estimate after each unit
    estimator = Estimator.create_and_start(units_of_work)
    print("Before starting work. Remaining time:", estimator.remaining_time_as_string())
    for i in range(units_of_work):
        print(f"Executing one unit of work. Work left: {units_of_work - i} units.")
        time.sleep(1.0)  # simulate work
        estimator.complete_work_units(1)
        print(
            "Executed work unit. Remaining time:",
            estimator.remaining_time_as_string(),
        )
    estimator.stop()

    # the same loop with a progress bar and a moving-average estimate
    tracker = Tracker(
        TrackCallbackFactory.get_callback("TQDM"), strategy="WINDOWED", window_size=2
    )
    for x in tracker.track(range(units_of_work * 2), message="Sleeping"):
        time.sleep(0.5 * (1 + x % 2))
