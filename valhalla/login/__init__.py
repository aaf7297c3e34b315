"""Character and equipment records with their character-select encodings."""