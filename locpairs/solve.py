from typing import Callable, Mapping, Optional, Sequence
import dataclasses
import sys

from locpairs import utils
from locpairs import glogging as logging
from locpairs.timing import Timing
from locpairs.data.pairs_data import LineStats, read_data_from_file

DEFAULT_INPUT_PATH = '1.txt'

DEFAULT_CONFIG = {
    'general': {
        'project_name': 'locpairs',
        'run_name': 'day1',
    },
    'data': {
        'input_path': DEFAULT_INPUT_PATH,
    },
    'parts': {
        'part1': {
            'module': 'locpairs.scores.total_distance.calculate_total_distance',
            'label': 'Total distance',
            'summary_key': 'total_distance',
        },
        'part2': {
            'module': 'locpairs.scores.similarity.calculate_similarity_score',
            'label': 'Similarity score',
            'summary_key': 'similarity_score',
        },
    },
    'logging': {
        'log_dir': None,
        'log_filename': 'log.txt',
        'summaries_filename': 'summaries.json',
        'allow_overwrite_log': True,
        'enable_console': True,
    },
}

def run_part(name:str, input_path:str, part_config:Mapping,
             logger:Optional[logging.Logger]=None)->int:
    """Parses input_path, applies the part's calculator and prints the labeled result."""

    calculate:Callable[[Sequence[int], Sequence[int]], int] = utils.import_fn(part_config['module'])
    stats = LineStats()

    with Timing(name) as timing:
        left_list, right_list = read_data_from_file(input_path, stats)
        result = calculate(left_list, right_list)

    print(f"{part_config['label']}: {result}")

    if logger is not None:
        d = {f'{name}/{part_config["summary_key"]}': result,
             f'{name}/elapsed_s': timing.elapsed}
        d.update({f'{name}/{k}': v for k, v in dataclasses.asdict(stats).items()})
        logger.summary(d)

    return result

def part1(input_path:str=DEFAULT_INPUT_PATH, logger:Optional[logging.Logger]=None,
          part_config:Optional[Mapping]=None)->int:
    return run_part('part1', input_path,
                    part_config or DEFAULT_CONFIG['parts']['part1'], logger)

def part2(input_path:str=DEFAULT_INPUT_PATH, logger:Optional[logging.Logger]=None,
          part_config:Optional[Mapping]=None)->int:
    return run_part('part2', input_path,
                    part_config or DEFAULT_CONFIG['parts']['part2'], logger)

def main(config:Optional[Mapping]=None)->int:
    """Runs part1 then part2, returns process exit status."""

    if config is None:
        config = DEFAULT_CONFIG

    input_path = config['data']['input_path']
    parts_config = config['parts']

    try:
        logger = logging.Logger(project_name=config['general']['project_name'],
                                run_name=config['general']['run_name'],
                                **config['logging'])
    except OSError as e:
        print(f'Error: cannot set up logging: {e}', file=sys.stderr)
        return 1

    try:
        logger.log_sys_info()
        logger.log_config(config)

        try:
            part1(input_path, logger, parts_config['part1'])
            part2(input_path, logger, parts_config['part2'])
        except OSError as e:
            logger.error(f'Cannot read input "{input_path}": {e}', stack_info=False)
            print(f'Error: {e}', file=sys.stderr)
            return 1
    except Exception as e:
        logger.error('Unexpected error', exception_instance=e)
        raise
    finally:
        logger.close()

    return 0
