import hypothesis.strategies as st


class Member:
    def __init__(self, name: int):
        self.name = name

    def __repr__(self):
        return f"Member({self.name})"


pool_sizes = st.integers(min_value=1, max_value=16)


@st.composite
def operations(draw, pool_size: int, max_size: int = 64) -> list[tuple[str, int]]:
    return draw(
        st.lists(
            st.tuples(
                st.sampled_from(["add", "remove"]),
                st.integers(min_value=0, max_value=pool_size - 1),
            ),
            max_size=max_size,
        )
    )


@st.composite
def pools_and_operations(draw):
    pool_size = draw(pool_sizes)
    pool = [Member(i) for i in range(pool_size)]
    return pool, draw(operations(pool_size))
