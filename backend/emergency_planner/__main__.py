from emergency_planner.main import run

run()
