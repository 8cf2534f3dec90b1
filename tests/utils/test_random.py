import numpy as np

from rps_sims.utils.random import current_seed, rng, seed_all


class TestNamedStreams:

    def test_same_seed_same_draws(self):
        seed_all(7)
        first = rng("placement").uniform(size=4)
        seed_all(7)
        second = rng("placement").uniform(size=4)
        np.testing.assert_array_equal(first, second)
        assert current_seed() == 7

    def test_streams_are_independent(self):
        seed_all(7)
        rng("culling").uniform(size=100)
        after_culling = rng("placement").uniform(size=4)
        seed_all(7)
        fresh = rng("placement").uniform(size=4)
        np.testing.assert_array_equal(after_culling, fresh)

    def test_stream_is_cached(self):
        assert rng("placement") is rng("placement")
