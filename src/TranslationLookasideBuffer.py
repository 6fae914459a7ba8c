from typing import Optional

TLB_SIZE = 16
EMPTY = -1


class TranslationLookasideBuffer:
	#	table entry is of the form: 	[p, f]
	# 	where p is the page number taken from a virtual address and f is the frame number holding that page; an empty
	#	slot has p = f = EMPTY
	#	slots are overwritten in strict rotation through next_entry, whatever they hold, so the oldest insertion is
	#	always the next one replaced

	def __init__(self, size: int = TLB_SIZE):
		self.table = [[EMPTY, EMPTY] for i in range(size)]
		self.next_entry = 0

	@property
	def size(self) -> int:
		return len(self.table)

	def index_of_page_in_table(self, page_number: int) -> int:
		"""returns the index of the entry in the table if 'page_number' is found in the entry; returns -1 if
		'page_number' is not found in any of the entries in the table"""
		for i, entry in enumerate(self.table):
			if entry[0] == page_number:
				return i
		return -1

	def lookup(self, page_number: int) -> Optional[int]:
		index = self.index_of_page_in_table(page_number)
		if index == -1:
			return None
		return self.get_frame_number(index)

	def insert(self, page_number: int, frame_number: int) -> int:
		"""writes the mapping into the slot under next_entry, advances next_entry and returns the slot written"""
		index = self.next_entry
		self.set_page_number(index, page_number)
		self.set_frame_number(index, frame_number)
		self.next_entry = (self.next_entry + 1) % self.size
		return index

	def invalidate(self, page_number: int) -> int:
		"""empties the slot holding 'page_number'; next_entry is left alone so the rotation order does not change"""
		index = self.index_of_page_in_table(page_number)
		if index != -1:
			self.table[index] = [EMPTY, EMPTY]
		return index

	def flush(self) -> None:
		for entry in self.table:
			entry[0] = EMPTY
			entry[1] = EMPTY
		self.next_entry = 0

	def set_page_number(self, index: int, page_number: int) -> None:
		self.table[index][0] = page_number

	def set_frame_number(self, index: int, frame_number: int) -> None:
		self.table[index][1] = frame_number

	def get_frame_number(self, index: int) -> int:
		return self.table[index][1]
