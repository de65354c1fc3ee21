# main.py
"""
Main entry point for the Bezier Burst animation.

This script orchestrates the whole lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Opens the window and builds the scene on top of it.
4. Hands the scene to the frame driver and runs the loop.
5. Handles clean shutdown.
"""
import logging
import sys
from utils import setup_logging, load_config
import cProfile
import pstats
import io

def main(config_path: str = 'config.json'):
    """
    The main function to run the animation.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config(config_path)
    except Exception as e:
        print(f"FATAL: Could not load {config_path}. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Bezier Burst Starting ---")

    scene_params = config['scene']
    run_params = config['run_control']
    vis_params = config['visualization']

    from scene import Scene
    from visualization import Visualizer

    # --- Component Initialization ---
    # 1. The visualizer owns the window and every host service.
    visualizer = Visualizer(
        width=vis_params['width'],
        height=vis_params['height'],
        caption=vis_params['caption'],
    )

    # 2. The scene only sees the services, never the window.
    scene = Scene(
        context=visualizer.get_drawing_context(),
        viewport_size=visualizer.viewport_size,
        seed=scene_params['seed'],
    )
    visualizer.on_resize(scene.on_viewport_resized)

    profiler = cProfile.Profile() if run_params['profile'] else None

    scene.start(visualizer)
    if profiler:
        profiler.enable()
    steps = visualizer.run(
        max_steps=run_params['max_steps'],
        log_throttle=run_params['log_throttle_steps'],
    )
    if profiler:
        profiler.disable()
    scene.stop()

    visualizer.close()
    logging.info(f"Animation loop finished after {steps} frames.")
    logging.debug(f"Phase transitions: {[(tick, phase.value) for tick, phase in scene.transitions]}")

    if profiler:
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        # Sort by cumulative time spent in the function
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Bezier Burst Shutting Down ---")


if __name__ == "__main__":
    main(*sys.argv[1:2])
