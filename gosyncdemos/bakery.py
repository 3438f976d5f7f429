"""The steps of a cupcake recipe, run one after another."""

import time

OVEN_SECONDS = 5
STEP_SECONDS = 2


def prepare_tray(tray_number, delay=STEP_SECONDS):
    """Prepare an empty baking tray."""
    print("preparing empty tray", tray_number)
    time.sleep(delay)
    return f"tray number {tray_number}"


def mix_cupcake(tray, delay=STEP_SECONDS):
    """Pour cupcake mixture into ``tray``."""
    print("Pouring cupcake Mixture in", tray)
    time.sleep(delay)
    return f"cupcake in {tray}"


def bake(mixture, delay=OVEN_SECONDS):
    """Bake ``mixture`` in the oven."""
    print("baking", mixture)
    time.sleep(delay)
    return f"baked {mixture}"


def add_topping(baked_cupcake, delay=STEP_SECONDS):
    """Add topping to a baked cupcake."""
    print("Adding topping to", baked_cupcake)
    time.sleep(delay)
    return f"topping on {baked_cupcake}"


def box(finished_cupcake, delay=STEP_SECONDS):
    """Pack a finished cupcake for delivery."""
    print("Boxing", finished_cupcake)
    time.sleep(delay)
    return f"{finished_cupcake} is boxed"


def cake_prep_sequential_main(count=10):
    """Run every step for ``count`` trays in turn; returns the boxed cupcakes."""
    boxed = []
    for tray_number in range(count):
        tray = prepare_tray(tray_number)
        mixed = mix_cupcake(tray)
        baked = bake(mixed)
        topped = add_topping(baked)
        packed = box(topped)
        print("accepting", packed)
        boxed.append(packed)
    return boxed