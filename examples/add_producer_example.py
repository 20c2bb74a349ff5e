"""Example: Adding a new producer type dynamically without modifying registry.py.

The new producer only computes candidates; indexing, sampling and writing
come from the shared output contract.
"""

from typing import List
from sentence_producers.config.params import require_param
from sentence_producers.producers.base import GENERATED_PARAMS, GeneratedSentenceProducer
from sentence_producers.producers.registry import register_producer, list_producers

class ReversedSentences(GeneratedSentenceProducer):
    """Example producer: reverses the word order of each configured sentence."""

    name = "Reversed Sentences"
    output_dir_name = "reversed"
    valid_params = GENERATED_PARAMS + ("sentences",)

    def __init__(self, params, rng=None):
        super().__init__(params, rng)
        self.sentences = require_param(params, "sentences", list, owner=self.name)

    def produce_sentences(self) -> List[str]:
        return [" ".join(reversed(s.split())) for s in self.sentences]

# Register it
register_producer("reversed sentences", ReversedSentences)

# Verify registration
print("Registered producers:")
for kind, where in list_producers().items():
    print(f"  {kind}: {where}")

# Now you can use it in config:
# sentence producer:
#   sentence producer type: reversed sentences
#   sentences: ["dogs bark", "fish swim"]
