"""
Example usage of the athenasql library.
"""

import asyncio

from athenasql import AthenaConnectionConfig, AthenaSqlDatabase, configure_logging


async def main():
    """Print the table info of the database configured in the environment."""
    configure_logging()

    try:
        config = AthenaConnectionConfig.from_env()
        db = await AthenaSqlDatabase.from_data_source_params(config, sample_rows_in_table_info=2)
        with db:
            print(f"Connected to database: {db.database}")
            print(f"Available tables: {db.get_usable_table_names()}")
            print()
            print(await db.get_table_info())

    except Exception as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    asyncio.run(main())
