"""Game data tree and extraction of items, maps, mobs and skills."""