"""Container for a loaded tabular dataset."""

from dataclasses import dataclass, field

import numpy as np
import pandas as pd


@dataclass
class TabularDataset:
    """Features and target loaded together."""

    features: pd.DataFrame  # (n_rows, n_columns)
    target: np.ndarray  # (n_rows,)
    name: str = "dataset"
    target_name: str = "target"
    class_names: list[str] = field(default_factory=list)

    @property
    def n_rows(self) -> int:
        return len(self.features)

    @property
    def n_columns(self) -> int:
        return self.features.shape[1]

    def __len__(self) -> int:
        return self.n_rows

    def shuffled(self, random_state: int | None = 42) -> "TabularDataset":
        """Return a copy with rows permuted (index reset)."""
        rng = np.random.default_rng(random_state)
        order = rng.permutation(self.n_rows)
        return TabularDataset(
            features=self.features.iloc[order].reset_index(drop=True),
            target=self.target[order],
            name=self.name,
            target_name=self.target_name,
            class_names=list(self.class_names),
        )
