"""Custom recipe-search exceptions."""


class RecipeSearchError(Exception):
    """Base exception for recipe-search errors."""


class ConfigError(RecipeSearchError):
    """Exception raised when required configuration is missing or invalid."""


class MissingAPIKeyError(ConfigError):
    """Exception raised when a required API key is not set.

    Raised before any client is constructed, so no network call
    happens when a key is absent. The ``env_var`` attribute names the
    variable that was looked up, which tells the OpenAI and Pinecone
    cases apart.
    """

    def __init__(self, service: str, env_var: str) -> None:
        super().__init__(
            f"{service} API key is required. Set the {env_var} environment "
            "variable or add it to a .env file."
        )
        self.service = service
        self.env_var = env_var


class EmbeddingDimensionError(RecipeSearchError):
    """Exception raised when an embedding has the wrong number of values.

    Stored vectors and query vectors are only comparable when they share
    the dimension the index was created with.
    """

    def __init__(self, actual: int, expected: int) -> None:
        super().__init__(
            f"Embedding has dimension {actual}, expected {expected}"
        )
        self.actual = actual
        self.expected = expected


class RecipeCorpusError(RecipeSearchError):
    """Exception raised for malformed recipe corpus files."""


class IndexMismatchError(RecipeSearchError):
    """Exception raised when an existing index was created differently.

    Vectors of one dimension cannot be written into an index of another,
    and scores from a different metric are not comparable.
    """

    def __init__(
        self,
        name: str,
        dimension: int,
        metric: str,
        expected_dimension: int,
        expected_metric: str,
    ) -> None:
        super().__init__(
            f"Index {name!r} has dimension {dimension} and metric {metric!r}, "
            f"expected dimension {expected_dimension} and metric "
            f"{expected_metric!r}"
        )
        self.name = name
        self.dimension = dimension
        self.metric = metric
