import os
import random

import pytest
import torch as t

from skel import Simplex


def pytest_addoption(parser):
    """
    Add a commandline option to specify a global RNG seed.
    """
    parser.addoption(
        "--rng-seed",
        action="store",
        default=0,
        type=int,
        help="Seed for random number generators. Use -1 for a random seed.",
    )


@pytest.fixture(scope="session")
def session_seed(request):
    """
    Determines the RNG seed for the entire session.
    """
    seed_arg = request.config.getoption("--rng-seed")

    if seed_arg == -1:
        seed = int.from_bytes(os.urandom(4), "big")
        print(f"\n[RNG] Using Random Session Seed: {seed}")
    else:
        seed = seed_arg

    return seed


@pytest.fixture(scope="function", autouse=True)
def set_rng(session_seed):
    """
    Resets the RNG state before each test function using the session seed.
    """
    t.manual_seed(session_seed)
    random.seed(session_seed)

    if t.cuda.is_available():
        t.cuda.manual_seed_all(session_seed)

    yield


def pytest_configure(config):
    """
    Add custom 'cpu_only' and 'gpu_only' markers to mark a test as running
    exclusively on CPU or GPU.
    """
    config.addinivalue_line("markers", "cpu_only: mark test to run only on cpu.")
    config.addinivalue_line("markers", "gpu_only: mark test to run only on gpu.")


@pytest.fixture(params=["cpu", "cuda"])
def device(request) -> t.device:
    """
    Set up a device fixture, such that

    * Tests accepting this fixture will be run on both CPU and GPU (when available),
    * Tests accepting this fixture but marked as 'cpu_only' will only run on CPU.
    * Tests accepting this fixture but marked as 'gpu_only' will only run on GPU.
    """
    mode = request.param

    if mode == "cuda" and not t.cuda.is_available():
        pytest.skip("[GPU] Skipping CUDA test: No GPU available.")

    if mode == "cpu" and request.node.get_closest_marker("gpu_only"):
        pytest.skip()

    if mode == "cuda" and request.node.get_closest_marker("cpu_only"):
        pytest.skip()

    return t.device(mode)


@pytest.fixture
def random_vertices():
    """
    Return a function that draws a list of distinct vertex indices in random
    order, with the list length drawn from [min_verts, max_verts].
    """

    def _random_vertices(min_verts: int = 1, max_verts: int = 8) -> list[int]:
        n_verts = random.randint(min_verts, max_verts)
        return random.sample(range(1000), n_verts)

    return _random_vertices


@pytest.fixture
def vertex() -> Simplex:
    return Simplex.new_checked([3])


@pytest.fixture
def edge() -> Simplex:
    return Simplex.new_checked([1, 4])


@pytest.fixture
def tri() -> Simplex:
    return Simplex.new_canonical([5, 0, 2])


@pytest.fixture
def tet() -> Simplex:
    return Simplex.new_canonical([7, 1, 3, 0])
