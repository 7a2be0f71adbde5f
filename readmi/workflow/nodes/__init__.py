from .project_loader_node import project_loader_node, readme_filename
from .readme_analyzer_node import readme_analyzer_node
from .update_decider_node import update_decider_node
from .readme_generator_node import readme_generator_node, build_mock_readme
from .readme_saver_node import readme_saver_node

__all__ = [
    "project_loader_node",
    "readme_filename",
    "readme_analyzer_node",
    "update_decider_node",
    "readme_generator_node",
    "build_mock_readme",
    "readme_saver_node",
]
